"""
Fixed-width lexer for the personnummer grammar.

    [CC]YYMMDD[SEP]NNNC

The century (CC) is optional; SEP is one of '+', '-', ' ' or absent.
The lexer only checks character classes and positions. It never
interprets the captured values.
"""

from dataclasses import dataclass
from typing import Optional

DIGITS = frozenset("0123456789")
SEPARATORS = frozenset("+- ")

# Field widths
CENTURY_WIDTH = 2
DATE_WIDTH = 6


@dataclass(frozen=True)
class RawCapture:
    """Verbatim captures from a matched input string."""

    century: Optional[str]
    year: str
    month: str
    day: str
    separator: str  # '' when absent
    sequence_number: str
    control_digit: str

    @property
    def checksum_digits(self) -> str:
        """YYMMDDNNN, the digits the control digit is computed over."""
        return self.year + self.month + self.day + self.sequence_number


def _all_digits(chunk: str) -> bool:
    return bool(chunk) and all(c in DIGITS for c in chunk)


def match(text: str) -> Optional[RawCapture]:
    """
    Match a string against the personnummer grammar.

    Surrounding whitespace is stripped first. Returns None when the
    string does not match.
    """
    text = text.strip()

    # Total length decides whether a century and/or separator is present
    length = len(text)
    if length not in (10, 11, 12, 13):
        return None
    century_width = CENTURY_WIDTH if length >= 12 else 0
    separator_width = length % 2

    century = text[:century_width] or None
    date_part = text[century_width:century_width + DATE_WIDTH]
    separator = text[century_width + DATE_WIDTH:century_width + DATE_WIDTH + separator_width]
    tail = text[century_width + DATE_WIDTH + separator_width:]

    if century is not None and not _all_digits(century):
        return None
    if not _all_digits(date_part) or not _all_digits(tail):
        return None
    if separator and separator not in SEPARATORS:
        return None

    return RawCapture(
        century=century,
        year=date_part[0:2],
        month=date_part[2:4],
        day=date_part[4:6],
        separator=separator,
        sequence_number=tail[0:3],
        control_digit=tail[3],
    )
