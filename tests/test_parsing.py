"""
Test suite for parsing module

Tests the numeric text grammar, float bridging and stdlib Decimal decomposition.
"""

import pytest
from decimal import Decimal

from bignumbers.errors import ParseError, ParseErrorKind
from bignumbers.parsing import (
    parse_string, parse_float, parse_int, parse_decimal, float_to_text
)


class TestParseString:
    """Test the decimal / scientific grammar"""

    def test_plain_forms(self):
        """Test integer, fractional and leading-point forms"""
        assert parse_string("123") == (123, 0, 1)
        assert parse_string("123.45") == (12345, -2, 1)
        assert parse_string(".5") == (5, -1, 1)
        assert parse_string("1.") == (1, 0, 1)
        assert parse_string("00120") == (120, 0, 1)

    def test_signs(self):
        """Test optional leading sign"""
        assert parse_string("-7") == (7, 0, -1)
        assert parse_string("+7") == (7, 0, 1)
        assert parse_string("-0.0") == (0, -1, -1)

    def test_exponents(self):
        """Test exponent marker with optional sign"""
        assert parse_string("-1.23e4") == (123, 2, -1)
        assert parse_string("+6.02E23") == (602, 21, 1)
        assert parse_string("1e1000") == (1, 1000, 1)
        assert parse_string("1e-1000") == (1, -1000, 1)
        assert parse_string("2.5e+3") == (25, 2, 1)

    def test_surrounding_whitespace(self):
        """Test that surrounding whitespace is trimmed"""
        assert parse_string("  42.0\n") == (420, -1, 1)
        assert parse_string("\t-1e5 ") == (1, 5, -1)

    def test_long_digit_strings(self):
        """Test coefficients longer than the interpreter's str/int limit"""
        text = "1" + "0" * 5000 + "1"
        coefficient, exponent, sign = parse_string(text)
        assert coefficient == 10 ** 5001 + 1
        assert exponent == 0
        assert sign == 1

    def test_long_exponent(self):
        """Test exponents longer than the interpreter's str/int limit"""
        ones = (10 ** 5000 - 1) // 9
        assert parse_string("1e" + "1" * 5000) == (1, ones, 1)
        assert parse_string("2.5e-" + "1" * 5000) == (25, -ones - 1, 1)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_input(self, text):
        """Test that blank input is rejected as empty"""
        with pytest.raises(ParseError, match="empty") as exc_info:
            parse_string(text)
        assert exc_info.value.kind == ParseErrorKind.EMPTY_INPUT

    @pytest.mark.parametrize("text", [
        "abc", "1.2.3", "e5", ".", "1e", "--1", "1 2", "0x10",
        "inf", "nan", "1,000", "1e2.5", "١٢",
    ])
    def test_invalid_format(self, text):
        """Test that anything outside the grammar is rejected"""
        with pytest.raises(ParseError, match="Invalid numeric string") as exc_info:
            parse_string(text)
        assert exc_info.value.kind == ParseErrorKind.INVALID_FORMAT
        assert exc_info.value.value == text

    def test_parse_error_is_value_error(self):
        """Test that ParseError can be caught as ValueError"""
        with pytest.raises(ValueError):
            parse_string("not a number")


class TestParseNative:
    """Test float, int and Decimal inputs"""

    def test_float_text(self):
        """Test shortest round-trip text for floats"""
        assert float_to_text(0.1) == "0.1"
        assert float_to_text(1e300) == "1e+300"
        assert float_to_text(-2.5) == "-2.5"

    def test_parse_float(self):
        """Test that floats keep every significant digit of their repr"""
        assert parse_float(0.1) == (1, -1, 1)
        assert parse_float(1.7976931348623157e308) == (17976931348623157, 292, 1)
        assert parse_float(-1e-7) == (1, -7, -1)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float(self, value):
        """Test that nan and infinities are rejected"""
        with pytest.raises(ParseError) as exc_info:
            parse_float(value)
        assert exc_info.value.kind == ParseErrorKind.NON_FINITE

    def test_parse_int(self):
        """Test exact integer decomposition"""
        assert parse_int(42) == (42, 0, 1)
        assert parse_int(-42) == (42, 0, -1)
        assert parse_int(10 ** 400) == (10 ** 400, 0, 1)

    def test_parse_decimal(self):
        """Test exact stdlib Decimal decomposition"""
        assert parse_decimal(Decimal("-1.50")) == (150, -2, -1)
        assert parse_decimal(Decimal("1E+1000")) == (1, 1000, 1)
        assert parse_decimal(Decimal("0")) == (0, 0, 1)

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_non_finite_decimal(self, value):
        """Test that special Decimal values are rejected"""
        with pytest.raises(ParseError) as exc_info:
            parse_decimal(Decimal(value))
        assert exc_info.value.kind == ParseErrorKind.NON_FINITE
