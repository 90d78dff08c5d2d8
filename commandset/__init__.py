"""Command definition and dispatch engine for text based bot commands."""

from .core import (
    Command,
    CommandResult,
    CommandResultStatus,
    CommandSet,
    ExecutionContext,
    ParseOptions,
    Signature,
    ThrottlerFactory,
    ThrottlerScope,
)
from .definitions import ArgDefinition, FlagDefinition, RestDefinition
from .errors import CommandNotInitializedError, CommandSetError
from .localization import Localization

__version__ = "1.0.0"

__all__ = [
    "ArgDefinition",
    "Command",
    "CommandNotInitializedError",
    "CommandResult",
    "CommandResultStatus",
    "CommandSet",
    "CommandSetError",
    "ExecutionContext",
    "FlagDefinition",
    "Localization",
    "ParseOptions",
    "RestDefinition",
    "Signature",
    "ThrottlerFactory",
    "ThrottlerScope",
]
