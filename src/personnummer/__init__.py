"""
Personnummer - Swedish personal identity numbers

Parsing, validation and formatting of:
- Personnummer (personal identity numbers), 10 or 12 digits
- Samordningsnummer (coordination numbers), day + 60
"""

from personnummer.errors import ErrorKind, ParseError
from personnummer.generator import generate_personnummer
from personnummer.identity import ParsedIdentity, Sex
from personnummer.luhn import luhn_checksum
from personnummer.parser import format_personnummer, is_valid, parse

__version__ = "0.1.0"

__all__ = [
    "parse",
    "is_valid",
    "format_personnummer",
    "generate_personnummer",
    "luhn_checksum",
    "ParsedIdentity",
    "Sex",
    "ParseError",
    "ErrorKind",
]
