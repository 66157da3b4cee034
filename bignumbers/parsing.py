"""
Parsing Module

Turns external input into raw (coefficient, exponent, sign) triples. These
functions know nothing about BigNum; BigNum normalizes whatever they return.
"""

import math
import re
from decimal import Decimal
from typing import Tuple

from .digits import parse_digits
from .errors import ParseError, ParseErrorKind

Components = Tuple[int, int, int]  # (coefficient, exponent, sign)

NUMBER_PATTERN = re.compile(
    r"([+-])?"                            # sign
    r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)"     # digits with optional point
    r"(?:[eE]([+-]?[0-9]+))?"             # exponent
)


def parse_string(text: str) -> Components:
    """
    Parse decimal or scientific notation text

    Accepts "123", "-1.5", "1.", ".25", "+6.02E23", "1e-1000". Surrounding
    whitespace is ignored.

    Raises:
        ParseError: EMPTY_INPUT for blank text, INVALID_FORMAT otherwise
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError("Cannot parse empty string", ParseErrorKind.EMPTY_INPUT, text)

    match = NUMBER_PATTERN.fullmatch(stripped)
    if match is None:
        raise ParseError(f"Invalid numeric string: {stripped}", ParseErrorKind.INVALID_FORMAT, text)

    sign_part, number, exp_part = match.groups()
    sign = -1 if sign_part == "-" else 1
    exponent = parse_digits(exp_part.lstrip("+-")) if exp_part else 0
    if exp_part and exp_part.startswith("-"):
        exponent = -exponent

    int_part, _, frac_part = number.partition(".")
    digits = int_part + frac_part
    return parse_digits(digits), exponent - len(frac_part), sign


def float_to_text(value: float) -> str:
    """
    Shortest text that round-trips to the same float

    Raises:
        ParseError: NON_FINITE for nan and infinities
    """
    if not math.isfinite(value):
        raise ParseError(f"Cannot construct BigNum from non-finite number: {value!r}",
                         ParseErrorKind.NON_FINITE, value)
    return repr(float(value))


def parse_float(value: float) -> Components:
    return parse_string(float_to_text(value))


def parse_int(value: int) -> Components:
    if value < 0:
        return -value, 0, -1
    return value, 0, 1


def parse_decimal(value: Decimal) -> Components:
    """Exact decomposition of a finite stdlib Decimal"""
    if not value.is_finite():
        raise ParseError(f"Cannot construct BigNum from non-finite Decimal: {value}",
                         ParseErrorKind.NON_FINITE, value)
    sign_bit, digit_tuple, exponent = value.as_tuple()
    coefficient = parse_digits("".join(map(str, digit_tuple)) or "0")
    return coefficient, exponent, -1 if sign_bit else 1
