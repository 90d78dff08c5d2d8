"""Argument, flag and rest definitions."""

from dataclasses import dataclass, field
from typing import Any

import hikari

from .parsers.base import Parser
from .parsers.factory import ArgType, ArgumentParserFactory


@dataclass
class ArgDefinition:
    """Defines a positional argument of a signature."""

    name: str
    arg_type: ArgType = hikari.OptionType.STRING
    description: str = ""
    optional: bool = False
    default: Any = None
    parser: Parser[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Argument name must be a non empty string")
        if not self.optional and self.default is not None:
            raise ValueError(f"Required argument {self.name!r} cannot have a default value")
        self.parser = ArgumentParserFactory.resolve(self.arg_type)


@dataclass
class FlagDefinition:
    """Defines a ``--name`` / ``-s`` flag of a signature.

    Boolean flags take no value; their presence sets them to ``True``.
    """

    name: str
    arg_type: ArgType = hikari.OptionType.BOOLEAN
    description: str = ""
    shortcut: str | None = None
    default: Any = None
    parser: Parser[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Flag name must be a non empty string")
        if self.shortcut is not None and len(self.shortcut) != 1:
            raise ValueError(f"Flag shortcut must be a single character, got {self.shortcut!r}")
        self.parser = ArgumentParserFactory.resolve(self.arg_type)

    @property
    def is_switch(self) -> bool:
        return self.arg_type == hikari.OptionType.BOOLEAN


@dataclass
class RestDefinition:
    """Defines the trailing variadic tokens of a signature.

    Without an ``arg_type`` the tokens are passed through as strings.
    """

    name: str
    description: str = ""
    arg_type: ArgType | None = None
    parser: Parser[Any] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Rest name must be a non empty string")
        self.parser = None if self.arg_type is None else ArgumentParserFactory.resolve(self.arg_type)
