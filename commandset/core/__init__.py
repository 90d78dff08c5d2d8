from .collection import CommandCollection
from .command import Command
from .command_set import CommandSet
from .loader import CommandLoader
from .options import ExecutionContext, ParseOptions
from .results import CommandResult, CommandResultStatus
from .signature import ParsedArguments, Signature
from .throttler import (
    CommandThrottler,
    GlobalThrottler,
    ScopedThrottler,
    ThrottlerFactory,
    ThrottlerScope,
)

__all__ = [
    "Command",
    "CommandCollection",
    "CommandLoader",
    "CommandResult",
    "CommandResultStatus",
    "CommandSet",
    "CommandThrottler",
    "ExecutionContext",
    "GlobalThrottler",
    "ParseOptions",
    "ParsedArguments",
    "ScopedThrottler",
    "Signature",
    "ThrottlerFactory",
    "ThrottlerScope",
]
