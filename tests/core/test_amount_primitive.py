"""txledger — amount parsing and display."""

from decimal import Decimal

import pytest

from core.primitives.amount import format_amount, parse_amount


class TestParseAmount:

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_is_none(self, text):
        assert parse_amount(text) is None

    def test_parses_decimal_text(self):
        assert parse_amount(" 1.2345 ") == Decimal("1.2345")

    def test_zero_and_negative_pass_through(self):
        assert parse_amount("0") == Decimal("0")
        assert parse_amount("-3.5") == Decimal("-3.5")

    def test_garbage_rejected(self):
        with pytest.raises(ValueError, match="not a decimal"):
            parse_amount("ten")

    @pytest.mark.parametrize("text", ["NaN", "inf", "-Infinity"])
    def test_non_finite_rejected(self, text):
        with pytest.raises(ValueError, match="finite"):
            parse_amount(text)

    def test_wide_amount_accepted(self):
        assert parse_amount("10000000000000000000000000") == Decimal(10) ** 25

    @pytest.mark.parametrize("text", ["1e48", "-1" + "0" * 48])
    def test_too_many_integer_digits_rejected(self, text):
        with pytest.raises(ValueError, match="integer digits"):
            parse_amount(text)

    def test_zero_with_large_exponent_accepted(self):
        assert parse_amount("0e60") == 0


class TestFormatAmount:

    def test_pads_to_four_places(self):
        assert format_amount(Decimal("1.5")) == "1.5000"
        assert format_amount(Decimal("100")) == "100.0000"

    def test_rounds_extra_places(self):
        assert format_amount(Decimal("0.12346")) == "0.1235"
        assert format_amount(Decimal("0.12345")) == "0.1234"

    def test_negative_zero_prints_as_zero(self):
        assert format_amount(Decimal("-0")) == "0.0000"
        assert format_amount(Decimal("-0.00001")) == "0.0000"

    def test_negative_value(self):
        assert format_amount(Decimal("-15")) == "-15.0000"

    def test_value_wider_than_default_context(self):
        assert format_amount(Decimal(10) ** 25) == "10000000000000000000000000.0000"
        assert format_amount(Decimal("1" * 40 + ".123456")) == "1" * 40 + ".1235"
