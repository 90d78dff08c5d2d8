"""Command tree nodes."""

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from ..definitions import ArgDefinition, FlagDefinition, RestDefinition
from ..errors import CommandNotInitializedError
from ..help.embed import default_help
from .collection import CommandCollection
from .options import ExecutionContext, ParseOptions
from .results import CommandResult
from .signature import Executor, Signature
from .throttler import CommandThrottler

if TYPE_CHECKING:
    from .command_set import CommandSet

logger = logging.getLogger(__name__)

InitHook = Callable[[Any, "CommandSet | None"], Any]
CanUsePredicate = Callable[[Any, "Command"], Any]


def _sort_signatures(signatures: list[Signature]) -> list[Signature]:
    # Most demanding first; sorted() is stable so declaration order breaks ties.
    return sorted(signatures, key=lambda s: (-s.min_arg_needed, -s.arg_count))


class Command:
    """A named node of the command tree.

    A command is configured with the chainable builder methods, then
    initialized once with :meth:`init` and executed any number of times.
    """

    def __init__(self, name: str, description: str = "", aliases: Sequence[str] = ()) -> None:
        if not isinstance(name, str) or not isinstance(description, str):
            raise TypeError("Name and description must be strings")
        if not name or any(c.isspace() for c in name):
            raise ValueError("Name must be a non empty string without whitespace")

        self._name = name
        self._description = description
        self._aliases: list[str] = []
        self._parent: Command | None = None
        self._delete_command_message = True
        self._ignored = False
        self._dev_only = False
        self._guild_only = False
        self._initialized = False
        self._on_init: InitHook | None = None
        self._can_use: CanUsePredicate | None = None
        self._throttler: CommandThrottler | None = None
        self._examples: list[str] = []
        self._signatures: list[Signature] = []
        self._subs = CommandCollection()

        self.alias(*aliases)

    def __repr__(self) -> str:
        return f"Command({self.full_name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def aliases(self) -> list[str]:
        return list(self._aliases)

    @property
    def parent(self) -> "Command | None":
        return self._parent

    # Settings below are inherited: a sub command is restricted by every
    # restriction set on one of its parents.

    @property
    def delete_command_message(self) -> bool:
        return all(cmd._delete_command_message for cmd in self.get_parents())

    @property
    def ignored(self) -> bool:
        return any(cmd._ignored for cmd in self.get_parents())

    @property
    def dev_only(self) -> bool:
        return any(cmd._dev_only for cmd in self.get_parents())

    @property
    def guild_only(self) -> bool:
        return any(cmd._guild_only for cmd in self.get_parents())

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def throttler(self) -> CommandThrottler | None:
        return self._throttler

    @property
    def examples(self) -> list[str]:
        return list(self._examples)

    @property
    def signatures(self) -> list[Signature]:
        return list(self._signatures)

    @property
    def subs(self) -> CommandCollection:
        return self._subs

    @property
    def has_executor(self) -> bool:
        return bool(self._signatures)

    @property
    def full_name(self) -> str:
        return " ".join(cmd.name for cmd in self.get_parents())

    def get_parents(self) -> list["Command"]:
        """Commands from the root down to this one, inclusive."""
        chain = [self]
        while chain[0]._parent is not None:
            chain.insert(0, chain[0]._parent)
        return chain

    def get_sub_command(self, name: str) -> "Command | None":
        sub = self._subs.get(name)
        if sub is None or sub.ignored:
            return None
        return sub

    def visible_subs(self) -> list["Command"]:
        """Sub commands that are not ignored."""
        return [sub for sub in self._subs if not sub.ignored]

    # Settings

    def _ensure_mutable(self) -> None:
        if self._initialized:
            raise RuntimeError(f"Command {self.full_name!r} is initialized and cannot be modified")

    def alias(self, *names: str) -> "Command":
        """Add alternative names for this command."""
        self._ensure_mutable()
        if self._parent is not None:
            raise RuntimeError("Aliases must be set before the command is attached")
        for alias in names:
            if not alias or any(c.isspace() for c in alias):
                raise ValueError(f"Invalid alias: {alias!r}")
            if alias != self._name and alias not in self._aliases:
                self._aliases.append(alias)
        return self

    def ignore(self) -> "Command":
        """Make this command not loaded by a command set."""
        self._ensure_mutable()
        self._ignored = True
        return self

    def keep_command_message(self) -> "Command":
        """Keep the message that called this command instead of deleting it."""
        self._ensure_mutable()
        self._delete_command_message = False
        return self

    def dev(self) -> "Command":
        """Restrict this command to developers."""
        self._ensure_mutable()
        self._dev_only = True
        return self

    def guild(self) -> "Command":
        """Restrict this command to guild messages."""
        self._ensure_mutable()
        self._guild_only = True
        return self

    def on_init(self, hook: InitHook) -> "Command":
        """Set the callback run once when this command is initialized."""
        self._ensure_mutable()
        if callable(hook):
            self._on_init = hook
        return self

    def can_use(self, predicate: CanUsePredicate) -> "Command":
        """Set the external permission predicate.

        It receives the message and the command and returns ``True`` to allow,
        ``False`` to deny, or a string to deny with that reason.
        """
        self._ensure_mutable()
        self._can_use = predicate
        return self

    def throttle(self, throttler: CommandThrottler) -> "Command":
        self._ensure_mutable()
        self._throttler = throttler
        return self

    def example(self, *lines: str) -> "Command":
        self._ensure_mutable()
        self._examples.extend(lines)
        return self

    def signature(
        self,
        executor: Executor,
        *args: ArgDefinition,
        flags: Sequence[FlagDefinition] = (),
        rest: RestDefinition | None = None,
    ) -> "Command":
        """Add an overload of this command."""
        self._ensure_mutable()
        self._signatures.append(Signature(executor, args, flags, rest))
        return self

    def sub(self, command: "Command") -> "Command":
        """Attach a sub command.

        A command that already has a parent, or that is ignored, is left
        untouched.
        """
        self._ensure_mutable()
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")

        if command._parent is not None:
            logger.warning(
                f"Command {command.name!r} already belongs to {command._parent.full_name!r}; "
                f"not attaching it to {self.full_name!r}"
            )
            return self
        if command.ignored:
            logger.debug(f"Skipped ignored sub command: {command.name}")
            return self
        if command in self.get_parents():
            logger.warning(f"Attaching {command.name!r} to {self.full_name!r} would create a cycle")
            return self

        self._subs.add(command)
        command._parent = self
        return self

    # Lifecycle

    async def init(self, context: Any = None, command_set: "CommandSet | None" = None) -> None:
        """Initialize sub commands then this command. Runs only once."""
        if self._initialized:
            return

        for sub in [s for s in self._subs if s._ignored]:
            self._subs.remove(sub.name)
            logger.debug(f"Dropped ignored sub command: {sub.full_name}")

        for sub in self._subs:
            await sub.init(context, command_set)

        self._signatures = _sort_signatures(self._signatures)

        if self._on_init is not None:
            result = self._on_init(context, command_set)
            if inspect.isawaitable(result):
                await result

        self._initialized = True
        logger.debug(f"Initialized command: {self.full_name}")

    async def check_permissions(self, message: Any, options: ParseOptions) -> CommandResult | None:
        """Run the dev, guild and predicate checks of this command and its parents.

        Returns the rejecting result, or None when the message may use the
        command.
        """
        if self.dev_only:
            author_id = getattr(getattr(message, "author", None), "id", None)
            if author_id is None or int(author_id) not in options.dev_ids:
                return CommandResult.dev_only(self)

        if self.guild_only and getattr(message, "guild_id", None) is None:
            return CommandResult.guild_only(self)

        for command in self.get_parents():
            if command._can_use is None:
                continue
            allowed = command._can_use(message, self)
            if inspect.isawaitable(allowed):
                allowed = await allowed
            if isinstance(allowed, str):
                return CommandResult.unauthorized(self, allowed)
            if not allowed:
                return CommandResult.unauthorized(self)

        return None

    async def execute(
        self,
        tokens: Sequence[str],
        context: Any = None,
        options: ParseOptions | None = None,
        command_set: "CommandSet | None" = None,
        *,
        message: Any = None,
    ) -> CommandResult:
        """Run the first signature matching the tokens.

        Executor faults are returned as an error result, never raised.
        """
        if not self._initialized:
            raise CommandNotInitializedError(self.full_name)

        options = options or ParseOptions()

        for signature in self._signatures:
            try:
                parsed = signature.try_parse(tokens, message)
                if parsed is None:
                    continue

                ctx = ExecutionContext(
                    command=self,
                    args=parsed.args,
                    flags=parsed.flags,
                    rest=parsed.rest,
                    options=options,
                    message=message,
                    context=context,
                    command_set=command_set,
                )
                return_value = await signature.invoke(ctx)
            except Exception as e:
                return CommandResult.failure(e, self)
            return CommandResult.success(self, signature, return_value)

        if options.help_on_signature_not_found and message is not None:
            await self._send_help(message, options, command_set)

        return CommandResult.signature_not_found(self)

    async def _send_help(self, message: Any, options: ParseOptions, command_set: "CommandSet | None") -> None:
        handler = command_set.help_handler if command_set is not None else default_help
        await handler(self, message, options)
