"""
bignumbers

Arbitrary-range decimal numbers (well beyond 1e1000) with exact addition,
subtraction and multiplication, and precision-bounded division and powers.
"""

from .errors import (
    BigNumError, ParseError, ParseErrorKind, UnsupportedInputTypeError,
    DivisionByZeroError, InvalidExponentError, FloatConversionOverflowError
)
from .number import BigNum, ZERO, ONE, from_value

__version__ = "1.0.0"

__all__ = [
    "BigNum",
    "ZERO",
    "ONE",
    "from_value",
    "BigNumError",
    "ParseError",
    "ParseErrorKind",
    "UnsupportedInputTypeError",
    "DivisionByZeroError",
    "InvalidExponentError",
    "FloatConversionOverflowError",
]
