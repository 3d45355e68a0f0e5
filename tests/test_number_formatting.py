"""Tests for convkit.formatting.numbers."""

import math

import pytest

from convkit.config import override_config
from convkit.formatting.numbers import (
    NAN_STRING,
    convert_base,
    number_with_commas,
    round_number,
    round_to,
    to_binary,
    to_binary_string,
    to_decimal,
    to_degrees,
    to_hex,
    to_hex_string,
    to_octal,
    to_octal_string,
    to_percentage,
    to_percentage_string,
    to_radians,
)


class TestNumberWithCommas:
    """Thousands separators."""

    @pytest.mark.parametrize("num,expected", [
        (1000, "1,000"),
        (1000000, "1,000,000"),
        (1234567890, "1,234,567,890"),
        (123, "123"),
        (0, "0"),
        (-1000, "-1,000"),
        (1000.0, "1,000"),
        (1234.5, "1,234.5"),
    ])
    def test_default_separator(self, num, expected):
        assert number_with_commas(num) == expected

    def test_configured_separator(self):
        with override_config(number_format={"thousands_separator": "."}):
            assert number_with_commas(1234567) == "1.234.567"
        assert number_with_commas(1234567) == "1,234,567"

    @pytest.mark.parametrize("num,expected", [
        (1e-7, "1e-7"),
        (1.5e-10, "1.5e-10"),
        (1e21, "1e+21"),
        (2.5e+25, "2.5e+25"),
    ])
    def test_exponent_form(self, num, expected):
        assert number_with_commas(num) == expected


class TestRadix:
    """Binary, octal, decimal and hexadecimal renderings."""

    @pytest.mark.parametrize("num,expected", [(10, "1010"), (255, "11111111"), (0, "0")])
    def test_to_binary(self, num, expected):
        assert to_binary(num) == expected

    @pytest.mark.parametrize("num,expected", [(255, "FF"), (4095, "FFF"), (0, "0")])
    def test_to_hex(self, num, expected):
        assert to_hex(num) == expected

    @pytest.mark.parametrize("num,expected", [(8, "10"), (64, "100"), (0, "0")])
    def test_to_octal(self, num, expected):
        assert to_octal(num) == expected

    @pytest.mark.parametrize("num,expected", [(255, "255"), (4095, "4095"), (0, "0")])
    def test_to_decimal(self, num, expected):
        assert to_decimal(num) == expected

    def test_negative_numbers_keep_sign(self):
        assert to_binary(-10) == "-1010"
        assert to_hex(-255) == "-FF"

    def test_fractional_digits(self):
        assert to_binary(0.5) == "0.1"
        assert to_hex(255.5) == "FF.8"
        assert to_octal(8.25) == "10.2"
        assert to_decimal(1.5) == "1.5"

    def test_integral_float(self):
        assert to_binary(4.0) == "100"
        assert to_decimal(4095.0) == "4095"

    @pytest.mark.parametrize("num,expected", [
        (0.000001, "0.000001"),
        (1.5e-5, "0.000015"),
        (1e-7, "1e-7"),
        (-3e-9, "-3e-9"),
        (float("inf"), "Infinity"),
        (float("nan"), "NaN"),
    ])
    def test_to_decimal_small_and_special(self, num, expected):
        assert to_decimal(num) == expected

    def test_aliases(self):
        assert to_binary_string(10) == "1010"
        assert to_hex_string(255) == "FF"
        assert to_octal_string(64) == "100"


class TestAngles:
    """Degree and radian conversion."""

    def test_to_degrees(self):
        assert to_degrees(math.pi) == pytest.approx(180)
        assert to_degrees(2 * math.pi) == pytest.approx(360)
        assert to_degrees(0) == 0

    def test_to_radians(self):
        assert to_radians(180) == pytest.approx(math.pi)
        assert to_radians(360) == pytest.approx(2 * math.pi)
        assert to_radians(0) == 0


class TestConvertBase:
    """Base-to-base conversion of digit strings."""

    @pytest.mark.parametrize("value,from_base,to_base,expected", [
        ("FF", "hex", "dec", "255"),
        ("1010", "bin", "dec", "10"),
        ("123", "dec", "hex", "7B"),
        ("10", "bin", "oct", "2"),
        ("777", "oct", "bin", "111111111"),
        ("ff", "hex", "hex", "FF"),
    ])
    def test_named_bases(self, value, from_base, to_base, expected):
        assert convert_base(value, from_base, to_base) == expected

    def test_trailing_invalid_digits_ignored(self):
        assert convert_base("12abc", "dec", "bin") == "1100"
        assert convert_base("1021", "bin", "dec") == "2"

    def test_prefix_whitespace_and_sign(self):
        assert convert_base("0x1f", "hex", "dec") == "31"
        assert convert_base("  42", "dec", "hex") == "2A"
        assert convert_base("-101", "bin", "dec") == "-5"

    @pytest.mark.parametrize("value,from_base", [("zz", "hex"), ("2", "bin"), ("", "dec"), ("-", "dec")])
    def test_no_valid_digits_is_nan(self, value, from_base):
        assert convert_base(value, from_base, "dec") == NAN_STRING == "NAN"

    def test_unknown_base_reads_as_decimal(self):
        assert convert_base("42", "base64", "hex") == "2A"
        assert convert_base("42", "dec", "roman") == "42"


class TestPercentage:
    """Percentage rendering."""

    @pytest.mark.parametrize("num,decimals,expected", [
        (0.1234, None, "12.34%"),
        (0.1234, 1, "12.3%"),
        (1, None, "100.00%"),
        (0, None, "0.00%"),
        (0.5, 0, "50%"),
        (-0.25, 1, "-25.0%"),
    ])
    def test_to_percentage(self, num, decimals, expected):
        assert to_percentage(num, decimals) == expected

    def test_exact_tie_rounds_away_from_zero(self):
        assert to_percentage(0.125, 0) == "13%"
        assert to_percentage(-0.125, 0) == "-13%"

    def test_configured_default_decimals(self):
        with override_config(number_format={"percentage_decimals": 4}):
            assert to_percentage(0.5) == "50.0000%"
            assert to_percentage(0.5, 1) == "50.0%"

    def test_alias(self):
        assert to_percentage_string(0.1234, 1) == "12.3%"

    def test_many_integer_digits_with_max_decimals(self):
        assert to_percentage(1e8, 20) == "10000000000.00000000000000000000%"
        assert to_percentage(1e18, 2) == "100000000000000000000.00%"

    @pytest.mark.parametrize("num,decimals,expected", [
        (1e19, 2, "1e+21%"),
        (1e20, None, "1e+22%"),
        (1e22, 0, "1e+24%"),
        (-1e22, 2, "-1e+24%"),
    ])
    def test_huge_values_print_in_exponent_form(self, num, decimals, expected):
        assert to_percentage(num, decimals) == expected

    @pytest.mark.parametrize("num,expected", [
        (1e307, "Infinity%"),
        (float("-inf"), "-Infinity%"),
        (float("nan"), "NaN%"),
    ])
    def test_non_finite(self, num, expected):
        assert to_percentage(num) == expected


class TestRounding:
    """Half-toward-positive-infinity rounding."""

    @pytest.mark.parametrize("num,expected", [
        (5.67, 6),
        (5.24, 5),
        (0, 0),
        (-5.5, -5),
        (2.5, 3),
        (-2.6, -3),
    ])
    def test_round_number(self, num, expected):
        assert round_number(num) == expected

    def test_round_number_returns_int(self):
        assert isinstance(round_number(5.67), int)

    def test_round_to(self):
        assert round_to(5.678, 2) == pytest.approx(5.68)
        assert round_to(5.1234, 1) == pytest.approx(5.1)
        assert round_to(0, 2) == 0

    def test_round_to_negative(self):
        # the binary value of -1.2345 decides the tie
        assert round_to(-1.2345, 3) == pytest.approx(-1.235, abs=5e-3)

    def test_round_to_half_goes_up(self):
        assert round_to(-0.5, 0) == 0
        assert round_to(1.5, 0) == 2

    def test_largest_double_below_half(self):
        assert round_number(0.49999999999999994) == 0
        assert round_number(-0.49999999999999994) == 0

    @pytest.mark.parametrize("num", [float("inf"), float("-inf")])
    def test_round_number_infinite(self, num):
        assert round_number(num) == num

    def test_round_number_nan(self):
        assert math.isnan(round_number(float("nan")))

    @pytest.mark.parametrize("num,decimals", [(1e307, 2), (1e300, 10), (-1e307, 2)])
    def test_round_to_overflow(self, num, decimals):
        result = round_to(num, decimals)
        assert math.isinf(result)
        assert (result > 0) == (num > 0)

    def test_round_to_large_finite(self):
        assert round_to(1e300, 2) == pytest.approx(1e300)
