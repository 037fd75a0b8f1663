"""Tests for the string rendering forms."""

import pytest
from complexeval.core.number import Complex
from complexeval.core.render import (
    RenderConfig, RenderFormat, niceround, render,
    to_exponential, to_fixed, to_precision, to_string,
)


class TestNiceRound:
    def test_integer(self):
        assert niceround(1.0) == "1"
        assert niceround(100.0) == "100"

    def test_fraction(self):
        assert niceround(2.5) == "2.5"
        assert niceround(-2.5) == "-2.5"

    def test_float_noise_trimmed(self):
        assert niceround(0.1 + 0.2) == "0.3"

    def test_negative_zero(self):
        assert niceround(-1e-15) == "0"
        assert niceround(-0.0) == "0"


class TestToString:
    @pytest.mark.parametrize("value, expected", [
        (Complex(3, 4), "3+4j"),
        (Complex(3, -4), "3-4j"),
        (Complex(0, 2), "2j"),
        (Complex(0, -2), "-2j"),
        (Complex(5), "5"),
        (Complex(0), "0"),
        (Complex(1, 1e-15), "1"),
        (Complex(-1.5, 0.25), "-1.5+0.25j"),
    ])
    def test_nice_form(self, value, expected):
        assert to_string(value) == expected


class TestToFixed:
    def test_both_parts(self):
        assert to_fixed(Complex(1.5, -2.25), 2) == "1.50-2.25j"

    def test_real_only(self):
        assert to_fixed(Complex(3)) == "3"
        assert to_fixed(Complex(3), 1) == "3.0"

    def test_imag_only(self):
        assert to_fixed(Complex(0, 2), 1) == "2.0j"


class TestToExponential:
    def test_real(self):
        assert to_exponential(Complex(1000)) == "1e+3"

    def test_real_with_digits(self):
        assert to_exponential(Complex(1234.5), 2) == "1.23e+3"

    def test_unit_modulus(self):
        assert to_exponential(Complex(0, 1)) == "e^0.5jπ"

    def test_negative_angle(self):
        assert to_exponential(Complex(0, -2)) == "2e^-0.5jπ"

    def test_rounded_factors(self):
        assert to_exponential(Complex(1, 1), 3) == "1.414e^0.25jπ"


class TestToPrecision:
    def test_fixed_notation(self):
        assert to_precision(Complex(123.456), 4) == "123.5"
        assert to_precision(Complex(0.000123), 2) == "0.00012"

    def test_scientific_notation(self):
        assert to_precision(Complex(123456), 2) == "1.2e+5"

    def test_both_parts(self):
        assert to_precision(Complex(1, -2), 3) == "1.00-2.00j"

    def test_shortest(self):
        assert to_precision(Complex(0.5)) == "0.5"
        assert to_precision(Complex(0, 3)) == "3j"

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            to_precision(Complex(1), 0)


class TestRender:
    def test_default_is_nice(self):
        assert render(Complex(1, 1)) == "1+1j"

    def test_config_selects_form(self):
        config = RenderConfig(format=RenderFormat.FIXED, digits=2)
        assert render(Complex(1, 1), config) == "1.00+1.00j"

    def test_format_from_value(self):
        assert RenderFormat("exponential") is RenderFormat.EXPONENTIAL
