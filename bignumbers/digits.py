"""
Digit string helpers.

CPython caps int <-> str conversion at sys.get_int_max_str_digits() digits.
Coefficients here grow without bound, so long values go through the decimal
module, whose int conversions are exact and uncapped.
"""

from decimal import Decimal

# Below the interpreter's default cap (4300) str()/int() are used directly
_DIRECT_LIMIT = 4000


def digit_string(n: int) -> str:
    """Decimal digits of a non-negative int"""
    if n.bit_length() < _DIRECT_LIMIT * 3:
        return str(n)
    return format(Decimal(n), "f")


def parse_digits(text: str) -> int:
    """int value of a string of ASCII digits"""
    if len(text) < _DIRECT_LIMIT:
        return int(text)
    return int(Decimal(text))


def digit_count(n: int) -> int:
    """Number of decimal digits in a non-negative int (1 for zero)"""
    return len(digit_string(n))
