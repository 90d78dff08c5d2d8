"""Signatures: one argument shape plus the executor it triggers."""

import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..definitions import ArgDefinition, FlagDefinition, RestDefinition
from ..parsers.context import ParsingContext
from ..parsers.errors import InvalidTypeError, ParseError

logger = logging.getLogger(__name__)

Executor = Callable[..., Any]


@dataclass(frozen=True)
class ParsedArguments:
    args: dict[str, Any] = field(default_factory=dict)
    flags: dict[str, Any] = field(default_factory=dict)
    rest: list[Any] = field(default_factory=list)


class Signature:
    """A candidate overload of a command.

    Arguments are checked when the signature is built: names must be unique
    and every required argument must come before the optional ones.
    """

    def __init__(
        self,
        executor: Executor,
        args: Sequence[ArgDefinition] = (),
        flags: Sequence[FlagDefinition] = (),
        rest: RestDefinition | None = None,
    ) -> None:
        if not callable(executor):
            raise TypeError("Signature executor must be callable")

        self.executor = executor
        self.args = tuple(args)
        self.flags = tuple(flags)
        self.rest = rest

        self._validate()

        self.required_args = tuple(a for a in self.args if not a.optional)
        self.optional_args = tuple(a for a in self.args if a.optional)
        self._long_flags = {f.name: f for f in self.flags}
        self._short_flags = {f.shortcut: f for f in self.flags if f.shortcut}

    def __repr__(self) -> str:
        names = ", ".join(a.name + ("?" if a.optional else "") for a in self.args)
        return f"Signature({names})"

    @property
    def min_arg_needed(self) -> int:
        return len(self.required_args)

    @property
    def arg_count(self) -> int:
        return len(self.args)

    def _validate(self) -> None:
        seen: set[str] = set()
        names = [a.name for a in self.args] + [f.name for f in self.flags]
        if self.rest:
            names.append(self.rest.name)
        for name in names:
            if name in seen:
                raise ValueError(f"Duplicate argument name in signature: {name!r}")
            seen.add(name)

        shortcuts = [f.shortcut for f in self.flags if f.shortcut]
        if len(shortcuts) != len(set(shortcuts)):
            raise ValueError("Duplicate flag shortcut in signature")

        optional_seen = False
        for arg in self.args:
            if arg.optional:
                optional_seen = True
            elif optional_seen:
                raise ValueError(f"Required argument {arg.name!r} cannot follow an optional argument")

    def _match_flag(self, token: str) -> FlagDefinition | None:
        if token.startswith("--"):
            return self._long_flags.get(token[2:])
        if len(token) == 2 and token.startswith("-"):
            return self._short_flags.get(token[1])
        return None

    def _extract_flags(self, tokens: Sequence[str], message: Any) -> tuple[list[str], dict[str, Any]]:
        if not self.flags:
            return list(tokens), {}

        positional: list[str] = []
        values: dict[str, Any] = {}
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token == "--":
                positional.extend(tokens[index + 1:])
                break

            flag = self._match_flag(token)
            if flag is None:
                positional.append(token)
                index += 1
            elif flag.is_switch:
                values[flag.name] = True
                index += 1
            else:
                context = ParsingContext(tokens[index + 1:], message=message)
                values[flag.name] = flag.parser.parse(context)
                index += 1 + context.position

        for flag in self.flags:
            values.setdefault(flag.name, flag.default)
        return positional, values

    def _parse_rest(self, context: ParsingContext) -> list[Any]:
        if self.rest is None or self.rest.parser is None:
            return context.take_rest()

        values = []
        while not context.exhausted:
            start = context.position
            values.append(self.rest.parser.parse(context))
            if context.position == start:
                raise InvalidTypeError(self.rest.parser.type_name, context.peek() or "")
        return values

    def try_parse(self, tokens: Sequence[str], message: Any = None) -> ParsedArguments | None:
        """Bind tokens to this signature.

        Returns ``None`` when the tokens do not match. Only parse failures mean
        "no match"; any other exception propagates to the caller.
        """
        try:
            positional, flags = self._extract_flags(tokens, message)
            context = ParsingContext(positional, message=message)

            args: dict[str, Any] = {}
            for arg in self.required_args:
                args[arg.name] = arg.parser.parse(context)

            stopped = False
            for arg in self.optional_args:
                if not stopped:
                    attempt = context.clone()
                    try:
                        args[arg.name] = arg.parser.parse(attempt)
                    except ParseError:
                        stopped = True
                    else:
                        context.commit(attempt)
                        continue
                args[arg.name] = arg.default

            rest = self._parse_rest(context)
        except ParseError as e:
            logger.debug(f"{self!r} does not match {list(tokens)!r}: {e}")
            return None

        return ParsedArguments(args=args, flags=flags, rest=rest)

    async def invoke(self, ctx: Any) -> Any:
        """Call the executor, awaiting it when it returns an awaitable."""
        result = self.executor(ctx)
        if inspect.isawaitable(result):
            result = await result
        return result
