"""Options and context objects passed through a dispatch."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..localization import Localization

if TYPE_CHECKING:
    from .command import Command
    from .command_set import CommandSet


@dataclass
class ParseOptions:
    prefix: str = ""
    help_on_signature_not_found: bool = False
    localization: Localization = field(default_factory=Localization)
    dev_ids: frozenset[int] = frozenset()

    @classmethod
    def from_settings(cls, settings: Any) -> "ParseOptions":
        """Build dispatch options from a ``CommandSetSettings`` instance."""
        localization = (
            Localization.from_file(settings.localization_file)
            if settings.localization_file
            else Localization()
        )
        return cls(
            prefix=settings.command_prefix,
            help_on_signature_not_found=settings.help_on_signature_not_found,
            localization=localization,
            dev_ids=frozenset(settings.dev_ids),
        )


@dataclass(frozen=True)
class ExecutionContext:
    """Everything an executor receives for one invocation."""

    command: "Command"
    args: Mapping[str, Any]
    flags: Mapping[str, Any]
    rest: list[Any]
    options: ParseOptions
    message: Any = None
    context: Any = None
    command_set: "CommandSet | None" = None

    async def respond(self, content: str | None = None, **kwargs: Any) -> Any:
        """Reply through the triggering message, when the transport gave one."""
        if self.message is None:
            raise RuntimeError("This invocation has no message to respond to")
        return await self.message.respond(content, **kwargs)
