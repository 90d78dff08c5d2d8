"""Cursor over the argument tokens of a single invocation."""

from collections.abc import Sequence
from typing import Any

from .errors import NotEnoughInputError


class ParsingContext:
    """Position over a sequence of tokens.

    Parsers read tokens with :meth:`next` and speculative parsers work on a
    :meth:`clone`, adopting its position with :meth:`commit` only on success.
    """

    __slots__ = ("tokens", "position", "message")

    def __init__(self, tokens: Sequence[str], position: int = 0, message: Any = None) -> None:
        self.tokens = tuple(tokens)
        self.position = position
        self.message = message

    def __repr__(self) -> str:
        return f"ParsingContext(tokens={self.tokens!r}, position={self.position})"

    @property
    def remaining(self) -> int:
        return len(self.tokens) - self.position

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> str | None:
        if self.exhausted:
            return None
        return self.tokens[self.position]

    def next(self) -> str:
        if self.exhausted:
            raise NotEnoughInputError(1, 0)
        token = self.tokens[self.position]
        self.position += 1
        return token

    def take_rest(self) -> list[str]:
        rest = list(self.tokens[self.position:])
        self.position = len(self.tokens)
        return rest

    def clone(self) -> "ParsingContext":
        return ParsingContext(self.tokens, self.position, self.message)

    def commit(self, other: "ParsingContext") -> None:
        """Adopt the position reached by a clone of this context."""
        if other.tokens != self.tokens:
            raise ValueError("Cannot commit a context built over other tokens")
        self.position = other.position
