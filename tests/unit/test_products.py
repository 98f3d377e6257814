"""Unit tests for the loan product catalogue"""

from decimal import Decimal

import pytest

from atlantique_loans.domain.exceptions import InvalidInputError
from atlantique_loans.domain.products import LOAN_PRODUCTS, get_product, quote_product


def test_catalogue_rates():
    assert {code: product.annual_rate_percent for code, product in LOAN_PRODUCTS.items()} == {
        "personal": Decimal("5.5"),
        "investment": Decimal("4.8"),
        "business_real_estate": Decimal("4.2"),
        "personal_real_estate": Decimal("3.9"),
    }


def test_quote_uses_product_rate():
    summary = quote_product("personal", 10000, 24)
    assert summary.terms.annual_rate_percent == Decimal("5.5")
    assert summary.monthly_payment == Decimal("440.96")


def test_quote_at_ceiling_is_allowed():
    assert quote_product("investment", 50000, 60).monthly_payment == Decimal("938.99")
    assert quote_product("personal", 50000, 24).monthly_payment == Decimal("2204.78")


def test_real_estate_quote():
    summary = quote_product(get_product("personal_real_estate"), 300000, 240)
    assert summary.monthly_payment == Decimal("1802.17")
    assert summary.total_payment == Decimal("432520.80")
    assert summary.total_interest == Decimal("132520.80")
    assert summary.interest_percentage == 44


def test_quote_above_ceiling_rejected():
    with pytest.raises(InvalidInputError, match="capped"):
        quote_product("personal", 60000, 24)


def test_unknown_product_rejected():
    with pytest.raises(InvalidInputError):
        quote_product("mortgage", 10000, 24)
