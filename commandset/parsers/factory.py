"""Resolves declared argument types to parsers."""

import logging
from collections.abc import Sequence
from typing import Any, Union

import hikari

from .base import Parser, UnionParser
from .builtin import (
    BooleanParser,
    ChannelParser,
    FloatParser,
    IntegerParser,
    RoleParser,
    StringParser,
    UserParser,
    mentionable_parser,
)

logger = logging.getLogger(__name__)

TypeSpec = Union[hikari.OptionType, Parser[Any]]
ArgType = Union[TypeSpec, Sequence[TypeSpec]]


class ArgumentParserFactory:
    """Factory for the parsers behind the tagged argument types."""

    _parsers: dict[hikari.OptionType, Parser[Any]] = {
        hikari.OptionType.STRING: StringParser(),
        hikari.OptionType.INTEGER: IntegerParser(),
        hikari.OptionType.FLOAT: FloatParser(),
        hikari.OptionType.BOOLEAN: BooleanParser(),
        hikari.OptionType.USER: UserParser(),
        hikari.OptionType.CHANNEL: ChannelParser(),
        hikari.OptionType.ROLE: RoleParser(),
        hikari.OptionType.MENTIONABLE: mentionable_parser(),
    }

    @classmethod
    def get_parser(cls, option_type: hikari.OptionType) -> Parser[Any]:
        """Get the parser registered for an option type."""
        try:
            return cls._parsers[option_type]
        except KeyError:
            raise TypeError(f"No parser registered for option type {option_type!r}") from None

    @classmethod
    def register(cls, option_type: hikari.OptionType, parser: Parser[Any]) -> None:
        """Register or replace the parser used for an option type."""
        if not isinstance(parser, Parser):
            raise TypeError(f"Expected a Parser, got {type(parser).__name__}")
        cls._parsers[option_type] = parser
        logger.debug(f"Registered parser {parser!r} for {option_type!r}")

    @classmethod
    def resolve(cls, arg_type: ArgType) -> Parser[Any]:
        """Turn a type spec (tag, parser, or a sequence of them) into one parser."""
        if isinstance(arg_type, Parser):
            return arg_type
        if isinstance(arg_type, hikari.OptionType):
            return cls.get_parser(arg_type)
        if isinstance(arg_type, (list, tuple)):
            if not arg_type:
                raise ValueError("An argument type union cannot be empty")
            parsers = [cls.resolve(t) for t in arg_type]
            return parsers[0] if len(parsers) == 1 else UnionParser(*parsers)
        raise TypeError(f"Unsupported argument type: {arg_type!r}")

    @staticmethod
    def type_keys(arg_type: ArgType) -> list[str]:
        """Keys used to look up localized type names for a type spec."""
        if isinstance(arg_type, (list, tuple)):
            keys: list[str] = []
            for t in arg_type:
                keys.extend(ArgumentParserFactory.type_keys(t))
            return keys
        if isinstance(arg_type, hikari.OptionType):
            return [arg_type.name.lower()]
        if isinstance(arg_type, UnionParser):
            return [p.type_name for p in arg_type.parsers]
        return [arg_type.type_name]
