"""Composable argument parsers."""

from .base import Parser, UnionParser
from .builtin import (
    BooleanParser,
    ChannelParser,
    FloatParser,
    IntegerParser,
    RoleParser,
    SnowflakeMentionParser,
    StringParser,
    UserParser,
    mentionable_parser,
)
from .context import ParsingContext
from .errors import InvalidTypeError, InvalidValueError, NotEnoughInputError, ParseError
from .factory import ArgumentParserFactory

__all__ = [
    "ArgumentParserFactory",
    "BooleanParser",
    "ChannelParser",
    "FloatParser",
    "IntegerParser",
    "InvalidTypeError",
    "InvalidValueError",
    "NotEnoughInputError",
    "ParseError",
    "Parser",
    "ParsingContext",
    "RoleParser",
    "SnowflakeMentionParser",
    "StringParser",
    "UnionParser",
    "UserParser",
    "mentionable_parser",
]
