"""Built-in parsers for the tagged argument types."""

import re
from collections.abc import Collection

import hikari

from .base import Parser, UnionParser
from .context import ParsingContext
from .errors import InvalidTypeError, InvalidValueError

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_TRUE_VALUES = frozenset({"true", "yes", "on", "1", "y"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0", "n"})


class StringParser(Parser[str]):
    """Parser for a single string token."""

    def __init__(self, choices: Collection[str] | None = None) -> None:
        super().__init__("string")
        self.choices = choices

    def _parse(self, context: ParsingContext) -> str:
        token = context.next()
        if self.choices is not None and token not in self.choices:
            raise InvalidValueError(f'"{token}" is not one of {", ".join(self.choices)}')
        return token


class _RangedNumberParser(Parser):
    def __init__(
        self,
        type_name: str,
        min_value: float | None = None,
        max_value: float | None = None,
    ) -> None:
        super().__init__(type_name)
        self.min_value = min_value
        self.max_value = max_value

    def _check_range(self, value):
        if self.min_value is not None and value < self.min_value:
            raise InvalidValueError(f"{value} is lower than {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            raise InvalidValueError(f"{value} is greater than {self.max_value}")
        return value


class IntegerParser(_RangedNumberParser):
    """Parser for integer arguments."""

    def __init__(self, min_value: int | None = None, max_value: int | None = None) -> None:
        super().__init__("integer", min_value, max_value)

    def _parse(self, context: ParsingContext) -> int:
        token = context.next()
        if not _INTEGER_PATTERN.fullmatch(token):
            raise InvalidTypeError(self.type_name, token)
        return self._check_range(int(token))


class FloatParser(_RangedNumberParser):
    """Parser for floating point arguments."""

    def __init__(self, min_value: float | None = None, max_value: float | None = None) -> None:
        super().__init__("float", min_value, max_value)

    def _parse(self, context: ParsingContext) -> float:
        token = context.next()
        try:
            value = float(token)
        except ValueError:
            raise InvalidTypeError(self.type_name, token) from None
        if value != value:  # NaN
            raise InvalidValueError("not a number")
        return self._check_range(value)


class BooleanParser(Parser[bool]):
    """Parser for boolean arguments."""

    def __init__(self) -> None:
        super().__init__("boolean")

    def _parse(self, context: ParsingContext) -> bool:
        token = context.next()
        lowered = token.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise InvalidTypeError(self.type_name, token)


class SnowflakeMentionParser(Parser[hikari.Snowflake]):
    """Parser for a mention or a raw id.

    Only the id is extracted; fetching the entity belongs to the transport.
    """

    def __init__(self, type_name: str, mention_pattern: str) -> None:
        super().__init__(type_name)
        self.pattern = re.compile(rf"{mention_pattern}|(?P<raw>\d+)")

    def _parse(self, context: ParsingContext) -> hikari.Snowflake:
        token = context.next()
        match = self.pattern.fullmatch(token)
        if not match:
            raise InvalidTypeError(self.type_name, token)
        return hikari.Snowflake(int(match.group("mention") or match.group("raw")))


class UserParser(SnowflakeMentionParser):
    def __init__(self) -> None:
        super().__init__("user", r"<@!?(?P<mention>\d+)>")


class ChannelParser(SnowflakeMentionParser):
    def __init__(self) -> None:
        super().__init__("channel", r"<#(?P<mention>\d+)>")


class RoleParser(SnowflakeMentionParser):
    def __init__(self) -> None:
        super().__init__("role", r"<@&(?P<mention>\d+)>")


def mentionable_parser() -> UnionParser:
    """User or role mention."""
    return UnionParser(UserParser(), RoleParser())
