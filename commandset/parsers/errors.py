"""Parse failures raised by parsers when a candidate does not match."""


class ParseError(Exception):
    """Base class for every recoverable parse failure."""


class NotEnoughInputError(ParseError):
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"not enough arguments: expected {expected}, got {got}.")
        self.expected = expected
        self.got = got


class InvalidTypeError(ParseError):
    """The token cannot be converted to the expected type."""

    def __init__(self, expected_type: str, value: str) -> None:
        super().__init__(f'the value cannot be parsed: expected {expected_type}, got "{value}"')
        self.expected_type = expected_type
        self.value = value


class InvalidValueError(ParseError):
    """The token was converted but does not meet the parser constraints."""

    def __init__(self, details: str | None = None) -> None:
        super().__init__("the parsed value is invalid" + (f": {details}" if details else "."))
        self.details = details
