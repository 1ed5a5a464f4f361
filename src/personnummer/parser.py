"""
Swedish personnummer (personal identity number) parsing and validation.

Format: [CC]YYMMDD[-+]NNNC
- CC: optional century
- YYMMDD: birth date (day + 60 for samordningsnummer)
- '+' separator: the person is 100 years or older
- NNN: birth number (last digit odd for male, even for female)
- C: Luhn checksum over YYMMDDNNN

Validation runs in a fixed order (format, checksum, date) and reports the
first stage that fails. Each stage returns either its value or a
ParseError; `parse` raises it and `is_valid` only inspects it.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from personnummer.errors import ErrorKind, ParseError
from personnummer.identity import Instant, ParsedIdentity, as_date, real_day
from personnummer.lexer import RawCapture, match
from personnummer.luhn import luhn_checksum

logger = logging.getLogger(__name__)

ParseResult = Union[ParsedIdentity, ParseError]


def lex(value: str) -> Union[RawCapture, ParseError]:
    """Stage 1: match the input against the grammar."""
    captured = match(value)
    if captured is None:
        return ParseError(
            "Input did not match expected format", ErrorKind.INVALID_FORMAT, value
        )
    return captured


def resolve_century(captured: RawCapture, now: date) -> int:
    """
    Stage 2: the century of the birth year.

    An explicit century is returned as-is. Otherwise guess the latest
    century that does not put the birthday in the future, then step back
    one more century for the '+' separator.

    Dates are compared as (year, month, day) tuples, so a nonsense month
    or day does not fail here and is left for the date check.
    """
    if captured.century is not None:
        return int(captured.century)

    guessed_year = (now.year // 100) * 100 + int(captured.year)
    birthday = (guessed_year, int(captured.month), real_day(int(captured.day)))

    # Today counts as passed
    if birthday > (now.year, now.month, now.day):
        guessed_year -= 100

    if captured.separator == "+":
        guessed_year -= 100

    return guessed_year // 100


def check_control_digit(captured: RawCapture, value: str) -> Optional[ParseError]:
    """Stage 3: the control digit must match the Luhn digit of YYMMDDNNN."""
    if luhn_checksum(captured.checksum_digits) != int(captured.control_digit):
        return ParseError(
            "Control digit did not match expected value", ErrorKind.CHECKSUM, value
        )
    return None


def check_date(
    full_year: int, month: int, encoded_day: int, value: str
) -> Optional[ParseError]:
    """Stage 4: month, day and the full date must exist in the calendar."""
    day = real_day(encoded_day)
    if not 1 <= month <= 12:
        return ParseError(f"{month} is not a valid month", ErrorKind.INVALID_DATE, value)
    if not 1 <= day <= 31:
        return ParseError(
            f"{encoded_day} is not a valid day", ErrorKind.INVALID_DATE, value
        )
    try:
        date(full_year, month, day)
    except ValueError:
        return ParseError("Input had invalid date", ErrorKind.INVALID_DATE, value)
    return None


def evaluate(value: str, now: Instant) -> ParseResult:
    """
    Run every validation stage over a string.

    Returns the ParsedIdentity, or the ParseError of the first failing
    stage. Never raises for string input.
    """
    captured = lex(value)
    if isinstance(captured, ParseError):
        return captured

    full_year = resolve_century(captured, as_date(now)) * 100 + int(captured.year)

    error = check_control_digit(captured, value)
    if error is not None:
        return error

    month = int(captured.month)
    encoded_day = int(captured.day)

    error = check_date(full_year, month, encoded_day, value)
    if error is not None:
        return error

    return ParsedIdentity(
        full_year=full_year,
        month=month,
        encoded_day=encoded_day,
        sequence_number=int(captured.sequence_number),
        control_digit=int(captured.control_digit),
        separator="+" if captured.separator == "+" else "-",
    )


def parse(value: str, now: Optional[Instant] = None) -> ParsedIdentity:
    """
    Parse and validate a personnummer or samordningsnummer.

    Accepts formats:
    - YYMMDD-NNNC / YYMMDD+NNNC / YYMMDD NNNC
    - YYMMDDNNNC
    - YYYYMMDD-NNNC
    - YYYYMMDDNNNC

    Args:
        value: The string to parse
        now: Reference instant for century guessing (default: now)

    Returns:
        The validated ParsedIdentity

    Raises:
        TypeError: If value is not a string
        ParseError: If value is not a valid personnummer
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {value!r}")
    if now is None:
        now = datetime.now()

    result = evaluate(value, now)
    if isinstance(result, ParseError):
        logger.debug("Rejected personnummer: %s", result.kind.value)
        raise result
    return result


def is_valid(value: object, now: Optional[Instant] = None) -> bool:
    """Check whether a value is a valid personnummer. Never raises."""
    if not isinstance(value, str):
        return False
    if now is None:
        now = datetime.now()
    return isinstance(evaluate(value, now), ParsedIdentity)


def format_personnummer(
    value: str, length: int = 12, now: Optional[Instant] = None
) -> Optional[str]:
    """
    Format a personnummer in its canonical 10- or 12-digit form.

    Args:
        value: The personnummer to format
        length: 10 (YYMMDD-NNNC) or 12 (YYYYMMDD-NNNC)
        now: Reference instant for century guessing and the '+' separator

    Returns:
        Formatted personnummer or None if invalid
    """
    if now is None:
        now = datetime.now()
    result = evaluate(value, now)
    if isinstance(result, ParseError):
        return None
    return result.to_string(length, now)
