import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .command import Command

logger = logging.getLogger(__name__)


class CommandCollection:
    """Commands of one tree level, indexed by name and by alias."""

    def __init__(self) -> None:
        self._commands: dict[str, "Command"] = {}
        self._aliases: dict[str, "Command"] = {}

    def __iter__(self) -> Iterator["Command"]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands or name in self._aliases

    def add(self, command: "Command") -> None:
        """Index a command; its name and aliases must not be taken yet."""
        for key in (command.name, *command.aliases):
            if key in self:
                raise ValueError(f"Command name or alias already in use: {key!r}")

        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command
        logger.debug(f"Indexed command: {command.name} (aliases: {command.aliases})")

    def remove(self, name: str) -> "Command | None":
        command = self.get(name)
        if command is None:
            return None

        self._commands.pop(command.name, None)
        for alias in command.aliases:
            self._aliases.pop(alias, None)
        return command

    def get(self, name: str) -> "Command | None":
        return self._commands.get(name) or self._aliases.get(name)

    def has_alias(self, alias: str) -> bool:
        return alias in self._aliases

    def names(self) -> list[str]:
        return list(self._commands)
