"""
Errors raised while parsing personnummer.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Which validation stage rejected the input."""

    INVALID_FORMAT = "invalid_format"
    CHECKSUM = "checksum"
    INVALID_DATE = "invalid_date"


class ParseError(Exception):
    """Raised when an input string is not a valid personnummer."""

    def __init__(self, message: str, kind: ErrorKind, input: str):
        self.message = message
        self.kind = kind
        self.input = input
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, kind={self.kind.value!r})"

    def is_format_error(self) -> bool:
        return self.kind == ErrorKind.INVALID_FORMAT

    def is_checksum_error(self) -> bool:
        return self.kind == ErrorKind.CHECKSUM

    def is_date_error(self) -> bool:
        return self.kind == ErrorKind.INVALID_DATE
