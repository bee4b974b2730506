"""Tests for jp_common.money - Decimal coercion, rounding and BRL display."""

from decimal import Decimal

from src.jp_common.money import (
    ZERO,
    clamp_non_negative,
    money_to_display,
    round_currency,
    to_decimal,
)


class TestToDecimal:
    def test_decimal_passthrough(self) -> None:
        assert to_decimal(Decimal("12.345")) == Decimal("12.345")

    def test_int_and_float(self) -> None:
        assert to_decimal(3) == Decimal("3")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_numeric_string_is_stripped(self) -> None:
        assert to_decimal(" 12.5 ") == Decimal("12.5")

    def test_none_is_zero(self) -> None:
        assert to_decimal(None) == ZERO

    def test_garbage_is_zero(self) -> None:
        assert to_decimal("abc") == ZERO
        assert to_decimal("") == ZERO
        assert to_decimal(object()) == ZERO

    def test_bool_is_zero(self) -> None:
        assert to_decimal(True) == ZERO

    def test_non_finite_is_zero(self) -> None:
        assert to_decimal(float("nan")) == ZERO
        assert to_decimal("inf") == ZERO
        assert to_decimal(Decimal("-Infinity")) == ZERO


class TestClampNonNegative:
    def test_positive_unchanged(self) -> None:
        assert clamp_non_negative(Decimal("1.5")) == Decimal("1.5")

    def test_negative_becomes_zero(self) -> None:
        assert clamp_non_negative(Decimal("-0.01")) == ZERO

    def test_negative_zero_becomes_zero(self) -> None:
        assert str(clamp_non_negative(Decimal("-0.00"))) == "0"


class TestRoundCurrency:
    def test_two_places(self) -> None:
        assert round_currency(Decimal("25")) == Decimal("25.00")
        assert str(round_currency(Decimal("25"))) == "25.00"

    def test_half_up(self) -> None:
        assert round_currency(Decimal("2.345")) == Decimal("2.35")
        assert round_currency(Decimal("0.005")) == Decimal("0.01")

    def test_half_away_from_zero_for_negatives(self) -> None:
        assert round_currency(Decimal("-2.345")) == Decimal("-2.35")

    def test_below_half_rounds_down(self) -> None:
        assert round_currency(Decimal("11.1105")) == Decimal("11.11")

    def test_garbage_rounds_to_zero(self) -> None:
        assert round_currency("nope") == Decimal("0.00")  # type: ignore[arg-type]


class TestMoneyToDisplay:
    def test_basic(self) -> None:
        assert money_to_display(Decimal("1234.5")) == "R$ 1.234,50"

    def test_zero(self) -> None:
        assert money_to_display(Decimal("0")) == "R$ 0,00"

    def test_none(self) -> None:
        assert money_to_display(None) == "R$ 0,00"

    def test_cents(self) -> None:
        assert money_to_display(Decimal("6.5")) == "R$ 6,50"

    def test_large(self) -> None:
        assert money_to_display(Decimal("1234567.891")) == "R$ 1.234.567,89"

    def test_negative(self) -> None:
        assert money_to_display(Decimal("-12")) == "-R$ 12,00"
