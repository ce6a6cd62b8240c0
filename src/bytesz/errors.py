"""Error types raised while parsing size strings."""

from enum import Enum


class ParseError(Enum):
    """Kinds of size string parse failure, in the order they are checked."""

    EMPTY = "cannot parse empty string"
    INVALID_NUMBER = "string does not start with invalid number"
    INVALID_UNITS = "string has invalid units"
    OVERFLOW = "number is too large"

    def __str__(self) -> str:
        return self.value


class ByteSizeParseError(ValueError):
    """Raised when a size string cannot be parsed.

    The ``kind`` attribute identifies the failure; the message is the kind's
    fixed description.
    """

    def __init__(self, kind: ParseError):
        self.kind = kind
        super().__init__(kind.value)

    def __str__(self) -> str:
        return self.kind.value
