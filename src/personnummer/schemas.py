"""
Pydantic models for serialising parsed personnummer.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from personnummer.identity import Instant, ParsedIdentity, Sex


class IdentitySummary(BaseModel):
    """JSON-friendly view of a ParsedIdentity at a reference instant."""

    normalized: str  # 12-digit format: YYYYMMDD-NNNC
    short: str  # 10-digit format: YYMMDD-NNNC or YYMMDD+NNNC
    birth_date: date
    sex: Sex
    age: int
    is_coordination_number: bool = False

    @classmethod
    def from_identity(
        cls, identity: ParsedIdentity, now: Optional[Instant] = None
    ) -> "IdentitySummary":
        if now is None:
            now = datetime.now()
        return cls(
            normalized=identity.to_string(12, now),
            short=identity.to_string(10, now),
            birth_date=identity.birthday,
            sex=identity.sex,
            age=identity.age(now),
            is_coordination_number=identity.is_coordination_number,
        )
