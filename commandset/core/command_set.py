"""Registry of root commands and entry point of a dispatch."""

import logging
import shlex
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any

from ..errors import CommandNotInitializedError
from ..help.embed import default_help
from .collection import CommandCollection
from .command import Command
from .loader import CommandLoader
from .options import ParseOptions
from .results import CommandResult

logger = logging.getLogger(__name__)

HelpHandler = Callable[[Command, Any, ParseOptions], Awaitable[None]]


class CommandSet:
    def __init__(self, options: ParseOptions | None = None, help_handler: HelpHandler | None = None) -> None:
        self.options = options or ParseOptions()
        self.help_handler: HelpHandler = help_handler or default_help
        self.commands = CommandCollection()
        self.loader = CommandLoader()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def add(self, command: Command) -> bool:
        """Register a root command. Ignored commands are skipped."""
        if self._initialized:
            raise RuntimeError("Cannot add commands to an initialized command set")
        if command.parent is not None:
            raise ValueError(f"{command.full_name!r} is a sub command and cannot be a root command")
        if command.ignored:
            logger.debug(f"Skipped ignored command: {command.name}")
            return False

        self.commands.add(command)
        logger.debug(f"Added command: {command.name} (aliases: {command.aliases})")
        return True

    def remove(self, name: str) -> Command | None:
        if self._initialized:
            raise RuntimeError("Cannot remove commands from an initialized command set")
        command = self.commands.remove(name)
        if command:
            logger.debug(f"Removed command: {command.name}")
        return command

    def load_commands(self, directory: str | Path) -> int:
        """Register every root command defined in a directory of modules."""
        added = 0
        for command in self.loader.load_directory(directory):
            if self.add(command):
                added += 1
        logger.info(f"Loaded {added} command(s) from {directory}")
        return added

    async def init(self, context: Any = None) -> None:
        if self._initialized:
            return
        for command in self.commands:
            await command.init(context, self)
        self._initialized = True
        logger.info(f"Command set initialized with {len(self.commands)} command(s)")

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Split text into tokens, keeping quoted words together."""
        lexer = shlex.shlex(text, posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ""
        try:
            return list(lexer)
        except ValueError:
            return text.split()

    def resolve(self, tokens: Sequence[str]) -> tuple[Command, list[str]] | None:
        """Walk the tree to the deepest command named by the leading tokens."""
        if not tokens:
            return None

        command = self.commands.get(tokens[0])
        if command is None:
            return None

        index = 1
        while index < len(tokens):
            sub = command.get_sub_command(tokens[index])
            if sub is None:
                break
            command = sub
            index += 1
        return command, list(tokens[index:])

    async def parse(
        self,
        text: str,
        message: Any = None,
        context: Any = None,
        options: ParseOptions | None = None,
    ) -> CommandResult:
        """Resolve and run the command named by a raw message text."""
        if not self._initialized:
            raise CommandNotInitializedError("command set")

        options = options or self.options
        if not text.startswith(options.prefix):
            return CommandResult.not_prefixed()

        resolved = self.resolve(self.tokenize(text[len(options.prefix):]))
        if resolved is None:
            return CommandResult.command_not_found()
        command, args = resolved

        denied = await command.check_permissions(message, options)
        if denied is not None:
            logger.debug(f"Command {command.full_name} denied: {denied.status.value}")
            return denied

        throttler = command.throttler
        if throttler is not None and throttler.increment(message):
            return CommandResult.throttled(command, throttler.get_cooldown(message))

        logger.info(f"Command called: {options.prefix}{command.full_name}")
        return await command.execute(args, context, options, self, message=message)

    async def handle_message(self, message: Any, context: Any = None) -> CommandResult | None:
        """Dispatch a platform message. Messages from bots are ignored."""
        author = getattr(message, "author", None)
        if getattr(author, "is_bot", False) or not getattr(message, "content", None):
            return None
        return await self.parse(message.content, message=message, context=context)
