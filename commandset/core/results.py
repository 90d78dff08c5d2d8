"""Outcome of a dispatch attempt."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .command import Command
    from .signature import Signature


class CommandResultStatus(str, Enum):
    OK = "ok"
    ERROR = "error"
    SIGNATURE_NOT_FOUND = "signature_not_found"
    NOT_PREFIXED = "not_prefixed"
    COMMAND_NOT_FOUND = "command_not_found"
    DEV_ONLY = "dev_only"
    GUILD_ONLY = "guild_only"
    UNAUTHORIZED = "unauthorized"
    THROTTLED = "throttled"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Immutable result of one dispatch attempt.

    Build instances through the classmethod constructors, one per status.
    """

    status: CommandResultStatus
    command: "Command | None" = None
    signature: "Signature | None" = None
    return_value: Any = None
    error: BaseException | None = None
    reason: str | None = None
    cooldown: int = 0

    @property
    def ok(self) -> bool:
        return self.status is CommandResultStatus.OK

    @classmethod
    def success(cls, command: "Command", signature: "Signature", return_value: Any) -> "CommandResult":
        return cls(CommandResultStatus.OK, command=command, signature=signature, return_value=return_value)

    @classmethod
    def failure(cls, error: BaseException, command: "Command | None" = None) -> "CommandResult":
        return cls(CommandResultStatus.ERROR, command=command, error=error)

    @classmethod
    def signature_not_found(cls, command: "Command") -> "CommandResult":
        return cls(CommandResultStatus.SIGNATURE_NOT_FOUND, command=command)

    @classmethod
    def not_prefixed(cls) -> "CommandResult":
        return cls(CommandResultStatus.NOT_PREFIXED)

    @classmethod
    def command_not_found(cls) -> "CommandResult":
        return cls(CommandResultStatus.COMMAND_NOT_FOUND)

    @classmethod
    def dev_only(cls, command: "Command") -> "CommandResult":
        return cls(CommandResultStatus.DEV_ONLY, command=command)

    @classmethod
    def guild_only(cls, command: "Command") -> "CommandResult":
        return cls(CommandResultStatus.GUILD_ONLY, command=command)

    @classmethod
    def unauthorized(cls, command: "Command", reason: str | None = None) -> "CommandResult":
        return cls(CommandResultStatus.UNAUTHORIZED, command=command, reason=reason)

    @classmethod
    def throttled(cls, command: "Command", cooldown: int) -> "CommandResult":
        return cls(CommandResultStatus.THROTTLED, command=command, cooldown=cooldown)
