"""
Generation of valid personnummer for test data.
"""

from datetime import date

from personnummer.identity import COORDINATION_OFFSET
from personnummer.luhn import luhn_checksum


def generate_personnummer(
    birth_date: date,
    gender: str = "M",
    birth_number: int = 1,
    coordination: bool = False,
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        gender: 'M' for male, 'F' for female
        birth_number: Birth number (0-999)
        coordination: Generate a samordningsnummer (day + 60)

    Returns:
        A valid personnummer in YYYYMMDDNNNC format
    """
    if gender not in ("M", "F"):
        raise ValueError("Gender must be 'M' or 'F'")
    if not 0 <= birth_number <= 999:
        raise ValueError("Birth number must be between 0 and 999")

    # Adjust birth number for gender (odd for male, even for female)
    if gender == "M" and birth_number % 2 == 0:
        birth_number += 1
    elif gender == "F" and birth_number % 2 == 1:
        birth_number += 1
    # 999 + 1 overflows for women, step down instead
    if birth_number > 999:
        birth_number -= 2

    day = birth_date.day + (COORDINATION_OFFSET if coordination else 0)
    date_part = f"{birth_date.year:04d}{birth_date.month:02d}{day:02d}"
    birth_str = f"{birth_number:03d}"

    # Calculate checksum on 10-digit format
    check_digits = date_part[2:] + birth_str
    checksum = luhn_checksum(check_digits)

    return f"{date_part}{birth_str}{checksum}"
