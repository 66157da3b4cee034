"""
BigNum Value Module

Arbitrary-range decimal numbers held as sign * coefficient * 10^exponent.
Addition, subtraction and multiplication are exact; division and negative
powers round to a requested number of significant digits.

Every instance is canonical: trailing zeros of the coefficient are moved into
the exponent and zero is always (coefficient=0, exponent=0, sign=1), so two
BigNums are equal exactly when their fields are equal.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple, Union

from . import formatting, parsing
from .config import get_config
from .digits import digit_count, digit_string
from .errors import (
    DivisionByZeroError, FloatConversionOverflowError,
    InvalidExponentError, UnsupportedInputTypeError
)
from .logging_config import log_operation

logger = logging.getLogger("bignumbers.number")

Numeric = Union["BigNum", int, float, str, Decimal]

FORMAT_SPEC_PATTERN = re.compile(r"(?:\.([0-9]+))?([eEf])")


@dataclass(frozen=True, eq=False)
class BigNum:
    """
    Immutable arbitrary-range decimal number.

    Construct from raw fields (normalized on creation) or through the
    from_* class methods. Arithmetic methods accept anything from_value()
    accepts and always return new instances.
    """
    coefficient: int = 0
    exponent: int = 0
    sign: int = 1

    def __post_init__(self):
        coefficient, exponent = self.coefficient, self.exponent
        if isinstance(coefficient, bool) or not isinstance(coefficient, int):
            raise TypeError(f"Coefficient must be int, got {type(coefficient).__name__}")
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")

        sign = -1 if self.sign == -1 else 1
        if coefficient < 0:
            coefficient = -coefficient
            sign = -sign

        if coefficient == 0:
            exponent, sign = 0, 1
        else:
            while coefficient % 10 == 0:
                coefficient //= 10
                exponent += 1

        object.__setattr__(self, 'coefficient', coefficient)
        object.__setattr__(self, 'exponent', exponent)
        object.__setattr__(self, 'sign', sign)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> 'BigNum':
        return cls(0, 0, 1)

    @classmethod
    def one(cls) -> 'BigNum':
        return cls(1, 0, 1)

    @classmethod
    def from_string(cls, text: str) -> 'BigNum':
        """Parse "123.45", "-1.23e4", "1e1000", ".5" and similar"""
        return cls(*parsing.parse_string(text))

    @classmethod
    def from_float(cls, value: float) -> 'BigNum':
        """Exact value of the float's shortest round-trip text"""
        return cls(*parsing.parse_float(value))

    @classmethod
    def from_int(cls, value: int) -> 'BigNum':
        return cls(*parsing.parse_int(value))

    @classmethod
    def from_decimal(cls, value: Decimal) -> 'BigNum':
        return cls(*parsing.parse_decimal(value))

    @classmethod
    def from_value(cls, value: Numeric) -> 'BigNum':
        """
        Convert any supported input to a BigNum

        Args:
            value: BigNum (returned unchanged), int, float, str or decimal.Decimal

        Raises:
            ParseError: If text or a float/Decimal is not a finite number
            UnsupportedInputTypeError: For any other type, including bool
        """
        if isinstance(value, BigNum):
            return value
        if isinstance(value, bool):
            raise UnsupportedInputTypeError(value)
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        raise UnsupportedInputTypeError(value)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def is_positive(self) -> bool:
        return self.coefficient != 0 and self.sign == 1

    def is_negative(self) -> bool:
        return self.sign == -1

    def is_integer(self) -> bool:
        return self.exponent >= 0

    def digits(self) -> int:
        """Number of digits in the coefficient"""
        return digit_count(self.coefficient)

    def adjusted(self) -> int:
        """Power of ten of the leading digit (0 for zero)"""
        if self.is_zero():
            return 0
        return self.exponent + self.digits() - 1

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @staticmethod
    def _align(a: 'BigNum', b: 'BigNum') -> Tuple[int, int, int]:
        """Signed coefficients of a and b scaled to their smaller exponent"""
        a_signed = a.sign * a.coefficient
        b_signed = b.sign * b.coefficient
        if a.exponent > b.exponent:
            return a_signed * 10 ** (a.exponent - b.exponent), b_signed, b.exponent
        if b.exponent > a.exponent:
            return a_signed, b_signed * 10 ** (b.exponent - a.exponent), a.exponent
        return a_signed, b_signed, a.exponent

    def cmp(self, other: Numeric) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other"""
        other = BigNum.from_value(other)
        if self.is_zero() and other.is_zero():
            return 0
        if self.is_zero():
            return -other.sign
        if other.is_zero():
            return self.sign
        if self.sign != other.sign:
            return 1 if self.sign > other.sign else -1

        # Same sign: differing orders of magnitude decide without scaling
        if self.adjusted() != other.adjusted():
            result = 1 if self.adjusted() > other.adjusted() else -1
            return result * self.sign

        a, b, _ = BigNum._align(self, other)
        if a == b:
            return 0
        return 1 if a > b else -1

    def eq(self, other: Numeric) -> bool:
        return self.cmp(other) == 0

    def lt(self, other: Numeric) -> bool:
        return self.cmp(other) < 0

    def lte(self, other: Numeric) -> bool:
        return self.cmp(other) <= 0

    def gt(self, other: Numeric) -> bool:
        return self.cmp(other) > 0

    def gte(self, other: Numeric) -> bool:
        return self.cmp(other) >= 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self) -> 'BigNum':
        return BigNum(self.coefficient, self.exponent, -self.sign)

    def absolute(self) -> 'BigNum':
        return BigNum(self.coefficient, self.exponent, 1)

    def add(self, other: Numeric) -> 'BigNum':
        """Exact sum"""
        other = BigNum.from_value(other)
        if self.is_zero():
            return other
        if other.is_zero():
            return self

        a, b, exponent = BigNum._align(self, other)
        total = a + b
        if total == 0:
            return ZERO
        return BigNum(abs(total), exponent, -1 if total < 0 else 1)

    def sub(self, other: Numeric) -> 'BigNum':
        """Exact difference"""
        return self.add(BigNum.from_value(other).negate())

    def mul(self, other: Numeric) -> 'BigNum':
        """Exact product"""
        other = BigNum.from_value(other)
        if self.is_zero() or other.is_zero():
            return ZERO
        return BigNum(
            self.coefficient * other.coefficient,
            self.exponent + other.exponent,
            self.sign * other.sign
        )

    def div(self, other: Numeric, precision: Optional[int] = None) -> 'BigNum':
        """
        Quotient rounded half-up to `precision` significant digits

        The coefficient quotient is computed with guard digits beyond the
        requested precision and then rounded once. This bounds the error to
        about one unit in the last kept digit; it is not a proof of correctly
        rounded division.

        Args:
            other: Divisor
            precision: Significant digits to keep (config.division_precision if None)

        Raises:
            DivisionByZeroError: If other is zero
            ValueError: If precision is less than 1
        """
        settings = get_config()
        other = BigNum.from_value(other)
        if precision is None:
            precision = settings.division_precision
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise ValueError(f"Precision must be an int, got {precision!r}")
        if precision < 1:
            raise ValueError("Precision must be at least 1")
        if other.is_zero():
            raise DivisionByZeroError("Division by zero")
        if self.is_zero():
            return ZERO

        # A divisor with a longer coefficient would eat into the guard digits
        shortfall = max(0, other.digits() - self.digits())
        guard = precision + settings.guard_digits + shortfall

        quotient = (self.coefficient * 10 ** guard) // other.coefficient
        exponent = self.exponent - other.exponent - guard
        sign = self.sign * other.sign

        total_digits = digit_count(quotient)
        if total_digits > precision:
            drop = total_digits - precision
            divisor = 10 ** drop
            quotient, remainder = divmod(quotient, divisor)
            if remainder * 2 >= divisor:
                quotient += 1
            exponent += drop
            log_operation(
                logger, "debug", "Rounded quotient",
                operation="div",
                extra={"precision": precision, "guard": guard, "dropped_digits": drop}
            )

        return BigNum(quotient, exponent, sign)

    def pow(self, n: Union[int, float, Decimal, 'BigNum'], precision: Optional[int] = None) -> 'BigNum':
        """
        Integer power

        Positive powers are exact (square-and-multiply). Negative powers are
        the reciprocal of the exact positive power, divided to `precision`
        significant digits.

        Raises:
            InvalidExponentError: If n is not an integer
            DivisionByZeroError: For a negative power of zero
        """
        n = _integral_exponent(n)
        if n == 0:
            return ONE
        if n < 0:
            log_operation(logger, "debug", "Reciprocal of positive power",
                          operation="pow", extra={"exponent": n})
            return ONE.div(self.pow(-n), precision)

        result = ONE
        base = self
        while n:
            if n & 1:
                result = result.mul(base)
            n >>= 1
            if n:
                base = base.mul(base)
        return result

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_string(self, significant: Optional[int] = None) -> str:
        """Scientific notation, e.g. "-1.23456e+400" (config.significant_digits if None)"""
        if significant is None:
            significant = get_config().significant_digits
        return formatting.to_scientific(self.coefficient, self.exponent, self.sign, significant)

    def to_fixed(self, digits: Optional[int] = None) -> str:
        """Fixed-point text with `digits` truncated fractional digits (config.fixed_digits if None)"""
        if digits is None:
            digits = get_config().fixed_digits
        return formatting.to_fixed(self.coefficient, self.exponent, self.sign, digits)

    def to_float(self) -> float:
        """
        Nearest native float

        Magnitudes beyond the float range become +/-inf, or raise
        FloatConversionOverflowError when config.float_overflow is "raise".
        Magnitudes below the smallest subnormal become 0.0.
        """
        if self.is_zero():
            return 0.0
        value = float(self.to_string(self.digits()))
        if math.isinf(value):
            if get_config().float_overflow == "raise":
                raise FloatConversionOverflowError(
                    f"{self.to_string(6)} is outside the float range"
                )
            log_operation(
                logger, "warning", "Float conversion saturated to infinity",
                operation="to_float",
                extra={"value": self.to_string(6)}
            )
        return value

    def to_int(self) -> int:
        """Integer part, truncated toward zero"""
        if self.exponent >= 0:
            return self.sign * self.coefficient * 10 ** self.exponent
        return self.sign * (self.coefficient // 10 ** -self.exponent)

    def to_decimal(self) -> Decimal:
        """Exact decimal.Decimal with the same value"""
        digit_tuple = tuple(int(d) for d in digit_string(self.coefficient))
        return Decimal((1 if self.sign < 0 else 0, digit_tuple, self.exponent))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigNum('{self.to_string(self.digits())}')"

    def __format__(self, format_spec: str) -> str:
        """
        Supports "", "e", ".Ne", "E", ".NE", "f" and ".Nf"

        ".Ne" keeps N digits after the point (N + 1 significant). ".Nf"
        truncates like to_fixed(); bare "f" is the exact positional value.
        """
        if not format_spec:
            return str(self)
        match = FORMAT_SPEC_PATTERN.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for BigNum")

        precision, kind = match.groups()
        if kind == "f":
            if precision is None:
                return formatting.to_plain(self.coefficient, self.exponent, self.sign)
            return self.to_fixed(int(precision))

        significant = int(precision) + 1 if precision is not None else self.digits()
        text = self.to_string(significant)
        return text.upper() if kind == "E" else text

    def __hash__(self) -> int:
        # Matches hash() of an equal int, float or Decimal
        return hash(self.to_decimal())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __eq__(self, other) -> bool:
        """
        Numeric equality with BigNum, int, float and decimal.Decimal

        Floats compare by their exact binary value, as decimal.Decimal does,
        so BigNum("0.1") != 0.1 while BigNum("0.5") == 0.5.
        """
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, float):
            if not math.isfinite(other):
                return False
            other = BigNum.from_decimal(Decimal(other))
        elif isinstance(other, Decimal):
            if not other.is_finite():
                return False
            other = BigNum.from_decimal(other)
        elif isinstance(other, int):
            other = BigNum.from_int(other)
        elif not isinstance(other, BigNum):
            return NotImplemented
        return (self.sign, self.coefficient, self.exponent) == (other.sign, other.coefficient, other.exponent)

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else self.lt(other)

    def __le__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else self.lte(other)

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else self.gt(other)

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        return NotImplemented if other is None else self.gte(other)

    def __neg__(self) -> 'BigNum':
        return self.negate()

    def __pos__(self) -> 'BigNum':
        return self

    def __abs__(self) -> 'BigNum':
        return self.absolute()

    def __add__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __pow__(self, n, modulo=None) -> 'BigNum':
        if modulo is not None:
            return NotImplemented
        return self.pow(n)

    def __rpow__(self, other) -> 'BigNum':
        other = _coerce(other)
        return NotImplemented if other is None else other.pow(self)


def _coerce(value) -> Optional[BigNum]:
    """BigNum for operator operands, None when the type is not supported"""
    if isinstance(value, bool) or not isinstance(value, (BigNum, int, float, str, Decimal)):
        return None
    return BigNum.from_value(value)


def _integral_exponent(n) -> int:
    if isinstance(n, bool):
        raise InvalidExponentError("pow: exponent must be integer, got bool")
    if isinstance(n, int):
        return n
    if isinstance(n, float) and n.is_integer():
        return int(n)
    if isinstance(n, Decimal) and n.is_finite() and n == n.to_integral_value():
        return int(n)
    if isinstance(n, BigNum) and n.is_integer():
        return n.to_int()
    raise InvalidExponentError(f"pow: exponent must be integer, got {n!r}")


ZERO = BigNum.zero()
ONE = BigNum.one()


def from_value(value: Numeric) -> BigNum:
    """Module-level shorthand for BigNum.from_value"""
    return BigNum.from_value(value)
