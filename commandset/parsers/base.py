"""Parser contract and the union combinator."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .context import ParsingContext
from .errors import InvalidTypeError, NotEnoughInputError, ParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Parser(ABC, Generic[T]):
    """Base class for argument parsers.

    Subclasses implement :meth:`_parse`; callers always go through
    :meth:`parse`, which checks that enough tokens remain first.
    """

    def __init__(self, type_name: str, minimal_input_required: int = 1) -> None:
        self.type_name = type_name
        self.minimal_input_required = minimal_input_required

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_name!r})"

    def __or__(self, other: "Parser[Any]") -> "UnionParser":
        if not isinstance(other, Parser):
            return NotImplemented
        return UnionParser(self, other)

    def parse(self, context: ParsingContext) -> T:
        """Parse a value from the context, advancing it on success."""
        if context.remaining < self.minimal_input_required:
            raise NotEnoughInputError(self.minimal_input_required, context.remaining)
        return self._parse(context)

    @abstractmethod
    def _parse(self, context: ParsingContext) -> T:
        pass


class UnionParser(Parser[Any]):
    """Tries each candidate in order on a clone of the context.

    A failing candidate never consumes input; the first success wins and its
    position is committed to the shared context.
    """

    def __init__(self, *parsers: Parser[Any]) -> None:
        if not parsers:
            raise ValueError("UnionParser needs at least one parser")

        flattened: list[Parser[Any]] = []
        for parser in parsers:
            if isinstance(parser, UnionParser):
                flattened.extend(parser.parsers)
            else:
                flattened.append(parser)

        super().__init__(
            " | ".join(p.type_name for p in flattened),
            min(p.minimal_input_required for p in flattened),
        )
        self.parsers = tuple(flattened)

    def _parse(self, context: ParsingContext) -> Any:
        for parser in self.parsers:
            attempt = context.clone()
            try:
                value = parser.parse(attempt)
            except ParseError as e:
                logger.debug(f"Union candidate {parser.type_name} rejected: {e}")
                continue
            context.commit(attempt)
            return value

        raise InvalidTypeError(self.type_name, context.peek() or "")
