"""
Error Types Module

Every failure raised by the bignumbers package derives from BigNumError and
also from the matching built-in exception, so callers can catch either.
"""

from enum import Enum
from typing import Any


class ParseErrorKind(Enum):
    """Reasons an input could not be turned into a BigNum"""
    INVALID_FORMAT = "invalid_format"
    EMPTY_INPUT = "empty_input"
    NON_FINITE = "non_finite"
    UNSUPPORTED_TYPE = "unsupported_type"


class BigNumError(Exception):
    """Base class for all bignumbers errors"""


class ParseError(BigNumError, ValueError):
    """Input text or value is not a valid finite decimal number"""

    def __init__(self, message: str, kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT,
                 value: Any = None):
        super().__init__(message)
        self.kind = kind
        self.value = value


class UnsupportedInputTypeError(ParseError, TypeError):
    """Input is of a type that has no conversion to BigNum"""

    def __init__(self, value: Any):
        super().__init__(
            f"Unsupported type for BigNum: {type(value).__name__}",
            kind=ParseErrorKind.UNSUPPORTED_TYPE,
            value=value,
        )


class DivisionByZeroError(BigNumError, ZeroDivisionError):
    """Divisor is zero (division, or reciprocal of a negative power)"""


class InvalidExponentError(BigNumError, ValueError):
    """Exponent passed to pow is not an integer"""


class FloatConversionOverflowError(BigNumError, OverflowError):
    """Magnitude is outside the range of a native float"""
