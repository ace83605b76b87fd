"""Errors raised while turning endpoint notation into an ``Endpoint``."""


class ParseError(Exception):
    """Base class for every user-facing parse failure."""


class EndpointSyntaxError(ParseError):
    """The input does not match the grammar for the requested rule."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        expected: list[str] | None = None,
    ):
        self.line = line
        self.column = column
        self.expected = expected or []
        super().__init__(message)


class UnexpectedRuleError(ParseError):
    """A converter received a tree built for a different rule."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unexpected rule '{actual}', expected {expected}")


class UnsupportedTypeError(ParseError):
    """A variable type is a valid identifier but not a known type."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unsupported variable type '{type_name}'")


class DeclarationFileError(Exception):
    """A declaration file does not have a shape that holds notations."""
