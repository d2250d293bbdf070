"""Tests for Currency and Money value types."""

from decimal import Decimal

import pytest

from wallet.domain.errors import (
    CurrencyMismatchError,
    InvalidCurrencyError,
    MoneyOverflowError,
)
from wallet.domain.money import MAX_AMOUNT_MINOR, MIN_AMOUNT_MINOR, Currency, Money


class TestCurrency:
    def test_from_code_is_case_insensitive(self):
        assert Currency.from_code("eur") == Currency.eur()
        assert Currency.from_code("BTC").minor_unit_scale == 8

    def test_unknown_code_rejected(self):
        with pytest.raises(InvalidCurrencyError):
            Currency.from_code("XYZ")

    def test_code_must_have_three_letters(self):
        with pytest.raises(InvalidCurrencyError):
            Currency("EURO", 2, "€")

    def test_compared_by_code(self):
        assert Currency("EUR", 2, "EUR") == Currency.eur()
        assert hash(Currency("EUR", 2, "EUR")) == hash(Currency.eur())
        assert Currency.eur() != Currency.from_code("USD")


class TestMoneyConstruction:
    def test_from_decimal_scales_to_minor_units(self):
        money = Money.from_decimal(Decimal("2500.00"), Currency.eur())
        assert money.amount_minor == 250000

    def test_from_decimal_uses_bankers_rounding(self):
        eur = Currency.eur()
        assert Money.from_decimal(Decimal("0.125"), eur).amount_minor == 12
        assert Money.from_decimal(Decimal("0.135"), eur).amount_minor == 14
        assert Money.from_decimal(Decimal("-0.125"), eur).amount_minor == -12
        assert Money.from_decimal(Decimal("1.006"), eur).amount_minor == 101

    def test_from_decimal_zero_scale_currency(self):
        yen = Currency.from_code("JPY")
        assert Money.from_decimal(Decimal("1234.5"), yen).amount_minor == 1234

    def test_from_decimal_overflow(self):
        with pytest.raises(MoneyOverflowError):
            Money.from_decimal(Decimal("1e20"), Currency.eur())

    def test_from_minor_units_out_of_range(self):
        with pytest.raises(MoneyOverflowError):
            Money.from_minor_units(MAX_AMOUNT_MINOR + 1, Currency.eur())
        with pytest.raises(MoneyOverflowError):
            Money.from_minor_units(MIN_AMOUNT_MINOR - 1, Currency.eur())

    def test_rejects_non_integer_minor_units(self):
        with pytest.raises(TypeError):
            Money(12.5, Currency.eur())

    def test_zero(self):
        zero = Money.zero(Currency.eur())
        assert zero.amount_minor == 0
        assert zero.is_zero()

    def test_to_decimal(self):
        assert Money.from_minor_units(250000, Currency.eur()).to_decimal() == Decimal("2500.00")
        assert Money.from_minor_units(1, Currency.from_code("BTC")).to_decimal() == Decimal("0.00000001")


class TestMoneyArithmetic:
    def test_add_and_subtract(self):
        eur = Currency.eur()
        a = Money.from_minor_units(1050, eur)
        b = Money.from_minor_units(250, eur)
        assert a + b == Money.from_minor_units(1300, eur)
        assert a - b == Money.from_minor_units(800, eur)
        assert -a == Money.from_minor_units(-1050, eur)
        assert abs(Money.from_minor_units(-5, eur)) == Money.from_minor_units(5, eur)

    def test_mismatched_currencies_fail(self):
        eur = Money.from_minor_units(100, Currency.eur())
        usd = Money.from_minor_units(100, Currency.from_code("USD"))
        with pytest.raises(CurrencyMismatchError):
            eur + usd
        with pytest.raises(CurrencyMismatchError):
            eur - usd
        with pytest.raises(CurrencyMismatchError):
            eur < usd

    def test_equality_requires_same_currency(self):
        assert Money.from_minor_units(100, Currency.eur()) != Money.from_minor_units(
            100, Currency.from_code("USD")
        )

    def test_ordering(self):
        eur = Currency.eur()
        assert Money.from_minor_units(1, eur) < Money.from_minor_units(2, eur)
        assert Money.from_minor_units(3, eur) >= Money.from_minor_units(2, eur)

    def test_addition_overflow(self):
        eur = Currency.eur()
        with pytest.raises(MoneyOverflowError):
            Money.from_minor_units(MAX_AMOUNT_MINOR, eur) + Money.from_minor_units(1, eur)

    def test_sum(self):
        eur = Currency.eur()
        values = [Money.from_minor_units(v, eur) for v in (100, -30, 5)]
        assert Money.sum(values, eur) == Money.from_minor_units(75, eur)
        assert Money.sum([], eur) == Money.zero(eur)


def test_format():
    eur = Currency.eur()
    assert Money.from_minor_units(250000, eur).format() == "€2,500.00"
    assert Money.from_minor_units(-1230, eur).format() == "-€12.30"
    assert Money.from_minor_units(1500, Currency.from_code("JPY")).format() == "¥1,500"
