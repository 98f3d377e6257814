"""Unit tests for currency formatting and static conversion"""

from decimal import Decimal

import pytest

from atlantique_loans.domain.currency import convert_currency, format_currency, parse_currency
from atlantique_loans.domain.exceptions import InvalidInputError, UnsupportedCurrencyError
from atlantique_loans.domain.models import Currency


def test_format_euro_groups_thousands():
    assert format_currency(1234.5, "EUR") == "1 234,50 €"


def test_format_usd_and_fcfa_symbols():
    assert format_currency(1234.5, Currency.USD) == "1 234,50 $US"
    assert format_currency(1234.5, "FCFA") == "1 234,50 F CFA"


def test_format_always_two_fraction_digits():
    assert format_currency(0, "EUR") == "0,00 €"
    assert format_currency(7, "EUR") == "7,00 €"
    assert format_currency(Decimal("999.9"), "EUR") == "999,90 €"


def test_format_large_and_negative_amounts():
    assert format_currency(Decimal("-1234567.891"), "FCFA") == "-1 234 567,89 F CFA"
    assert format_currency(1000000, "USD") == "1 000 000,00 $US"


def test_format_rounds_half_up():
    assert format_currency(Decimal("0.005"), "EUR") == "0,01 €"
    assert format_currency(Decimal("2.675"), "EUR") == "2,68 €"


def test_format_tiny_negative_rounds_to_unsigned_zero():
    assert format_currency(Decimal("-0.004"), "EUR") == "0,00 €"


def test_format_rejects_unsupported_currency():
    with pytest.raises(UnsupportedCurrencyError):
        format_currency(10, "GBP")


def test_format_rejects_non_finite_amount():
    with pytest.raises(InvalidInputError):
        format_currency(float("nan"), "EUR")


def test_parse_currency_is_case_insensitive_and_knows_xof():
    assert parse_currency("eur") is Currency.EUR
    assert parse_currency(" usd ") is Currency.USD
    assert parse_currency("XOF") is Currency.FCFA
    assert parse_currency(Currency.FCFA) is Currency.FCFA


@pytest.mark.parametrize("code", ["GBP", "", "EURO", None, 978])
def test_parse_currency_rejects_unknown_codes(code):
    with pytest.raises(UnsupportedCurrencyError):
        parse_currency(code)


def test_convert_same_currency_is_identity():
    assert convert_currency(100, "EUR", "EUR") == 100
    # No rounding on a no-op
    assert convert_currency(Decimal("100.005"), "USD", "USD") == Decimal("100.005")


def test_convert_from_euro():
    assert convert_currency(100, "EUR", "USD") == Decimal("108.00")
    assert convert_currency(100, "EUR", "FCFA") == Decimal("65595.70")


def test_convert_to_euro():
    assert convert_currency(100, "USD", "EUR") == Decimal("92.59")
    assert convert_currency(1000, "FCFA", "EUR") == Decimal("1.52")


def test_convert_between_non_euro_currencies_goes_through_euro():
    assert convert_currency(1000, "FCFA", "USD") == Decimal("1.65")


def test_convert_validates_both_codes_even_when_equal():
    with pytest.raises(UnsupportedCurrencyError):
        convert_currency(1, "GBP", "GBP")
    with pytest.raises(UnsupportedCurrencyError):
        convert_currency(1, "EUR", "JPY")


def test_format_amount_beyond_default_precision():
    assert format_currency(Decimal("1e30"), "EUR") == "1" + " 000" * 10 + ",00 €"
    assert format_currency(Decimal("-123456789012345678901234567890.125"), "USD") == (
        "-123 456 789 012 345 678 901 234 567 890,13 $US"
    )


def test_convert_amount_beyond_default_precision():
    assert convert_currency(Decimal("1e27"), "EUR", "FCFA") == Decimal("655957" + "0" * 24 + ".00")
    assert convert_currency(Decimal("108" + "0" * 30), "USD", "EUR") == Decimal("1" + "0" * 32 + ".00")
