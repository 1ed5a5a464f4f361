"""
Luhn checksum used by Swedish personnummer and samordningsnummer.

Only the ten significant digits (YYMMDDNNN) take part; century digits
never do.
"""


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm:
    1. Double every digit at an even position (0-based, from the left)
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10
