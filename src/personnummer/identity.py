"""
Parsed personnummer record and the queries derived from it.

A ParsedIdentity is only ever built by personnummer.parser once every
validation stage has passed, so nothing here re-validates.

Coordination numbers (samordningsnummer) add 60 to the day. The encoded
day is kept verbatim in `encoded_day`; `day` and `birthday` give the real
day of month.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

Instant = Union[datetime, date]

COORDINATION_OFFSET = 60
CENTENARIAN_AGE = 100


class Sex(str, Enum):
    """Legal sex encoded by the birth number parity."""

    MALE = "M"
    FEMALE = "F"


def as_date(instant: Instant) -> date:
    """Reduce a reference instant to its calendar date."""
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def real_day(encoded_day: int) -> int:
    """Remove the coordination number offset from an encoded day."""
    if encoded_day > COORDINATION_OFFSET:
        return encoded_day - COORDINATION_OFFSET
    return encoded_day


@dataclass(frozen=True)
class ParsedIdentity:
    """A validated personnummer or coordination number."""

    full_year: int
    month: int
    encoded_day: int
    sequence_number: int
    control_digit: int
    separator: str = "-"

    @property
    def year(self) -> int:
        return self.full_year

    @property
    def day(self) -> int:
        """Day of month, with the coordination offset removed."""
        return real_day(self.encoded_day)

    @property
    def birthday(self) -> date:
        return date(self.full_year, self.month, self.day)

    @property
    def is_coordination_number(self) -> bool:
        return self.encoded_day > COORDINATION_OFFSET

    @property
    def sex(self) -> Sex:
        """
        Sex from the birth number.

        The last digit of the sequence number (second-to-last digit of
        the whole number) is odd for men and even for women.
        """
        return Sex.MALE if self.sequence_number % 2 == 1 else Sex.FEMALE

    @property
    def is_male(self) -> bool:
        return self.sex == Sex.MALE

    @property
    def is_female(self) -> bool:
        return self.sex == Sex.FEMALE

    def age(self, at: Optional[Instant] = None) -> int:
        """
        Whole years between the birthday and `at` (default: now).

        Instants before the birthday give 0.
        """
        if at is None:
            at = datetime.now()
        today = as_date(at)
        birthday = self.birthday

        years = today.year - birthday.year
        if (today.month, today.day) < (birthday.month, birthday.day):
            years -= 1
        return max(years, 0)

    def to_string(self, length: int = 10, now: Optional[Instant] = None) -> str:
        """
        Render as YYMMDD-NNNC (length 10) or YYYYMMDD-NNNC (length 12).

        The 10-digit form switches to '+' when the person is 100 or older
        at `now`. The 12-digit form always uses '-'.

        Raises:
            ValueError: If length is not 10 or 12
        """
        if length not in (10, 12):
            raise ValueError(f"Length must be 10 or 12, got {length!r}")

        tail = f"{self.month:02d}{self.encoded_day:02d}"
        tail += f"-{self.sequence_number:03d}{self.control_digit}"
        if length == 12:
            return f"{self.full_year:04d}{tail}"

        if now is None:
            now = datetime.now()
        if self.age(now) >= CENTENARIAN_AGE:
            tail = tail.replace("-", "+")
        return f"{self.full_year % 100:02d}{tail}"

    def __str__(self) -> str:
        return self.to_string(10)
