"""
Formatting Module

Scientific and fixed-point rendering. Both are pure functions of a canonical
(coefficient, exponent, sign) triple.
"""

from .digits import digit_string, parse_digits


def _sign_prefix(sign: int) -> str:
    return "-" if sign < 0 else ""


def to_scientific(coefficient: int, exponent: int, sign: int, significant: int) -> str:
    """
    Render as d.ddde+EXP with at most `significant` significant digits

    Excess digits are rounded half-up on the first dropped digit. A carry out
    of the leading digit (9.99 -> 10.0) bumps the exponent and the mantissa is
    re-derived so it keeps exactly `significant` digits.

    Examples:
        (1686, 397, 1), 4   -> "1.686e+400"
        (999, 997, 1), 2    -> "1.0e+1000"
        (0, 0, 1), any      -> "0"
    """
    if isinstance(significant, bool) or not isinstance(significant, int):
        raise ValueError(f"Significant digits must be an int, got {significant!r}")
    if significant < 1:
        raise ValueError("Significant digits must be at least 1")
    if coefficient == 0:
        return "0"

    digits = digit_string(coefficient)
    adjusted = exponent + len(digits) - 1

    if len(digits) > significant:
        kept = parse_digits(digits[:significant])
        if digits[significant] >= "5":
            kept += 1
        digits = digit_string(kept)
        if len(digits) > significant:
            # carry produced 10...0
            adjusted += 1
            digits = digits[:significant]

    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += "." + digits[1:]
    return f"{_sign_prefix(sign)}{mantissa}e{adjusted:+d}"


def to_fixed(coefficient: int, exponent: int, sign: int, digits: int) -> str:
    """
    Render with exactly `digits` digits after the decimal point

    The fractional part is truncated, not rounded.
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError(f"Fractional digits must be an int, got {digits!r}")
    if digits < 0:
        raise ValueError("Fractional digits must be non-negative")
    if coefficient == 0:
        return "0." + "0" * digits

    text = digit_string(coefficient)
    prefix = _sign_prefix(sign)

    if exponent >= 0:
        return f"{prefix}{text}{'0' * exponent}.{'0' * digits}"

    shift = -exponent
    if shift < len(text):
        int_part, frac_part = text[:-shift], text[-shift:]
    else:
        int_part, frac_part = "0", "0" * (shift - len(text)) + text

    frac_part = (frac_part + "0" * digits)[:digits]
    return f"{prefix}{int_part}.{frac_part}"


def to_plain(coefficient: int, exponent: int, sign: int) -> str:
    """Exact positional text with no trailing fractional zeros ("-0.0015", "12300")"""
    if coefficient == 0:
        return "0"
    if exponent >= 0:
        return to_fixed(coefficient, exponent, sign, 0)[:-1]
    return to_fixed(coefficient, exponent, sign, -exponent)
