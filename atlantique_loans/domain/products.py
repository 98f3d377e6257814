"""Loan product catalogue offered to clients"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Union

from atlantique_loans.domain.amortization import summarize_loan, validate_loan_terms
from atlantique_loans.domain.exceptions import InvalidInputError
from atlantique_loans.domain.models import LoanSummary
from atlantique_loans.domain.money import Number


@dataclass(frozen=True)
class LoanProduct:
    """A loan offer with its fixed annual rate and ceiling"""

    code: str
    label: str
    annual_rate_percent: Decimal
    max_amount: Decimal


LOAN_PRODUCTS: Dict[str, LoanProduct] = {
    product.code: product
    for product in (
        LoanProduct("personal", "Crédit Personnel", Decimal("5.5"), Decimal("50000")),
        LoanProduct("investment", "Prêt d'Investissement", Decimal("4.8"), Decimal("100000")),
        LoanProduct("business_real_estate", "Crédit Immobilier Business", Decimal("4.2"), Decimal("500000")),
        LoanProduct("personal_real_estate", "Crédit Immobilier Personnel", Decimal("3.9"), Decimal("300000")),
    )
}


def get_product(code: Union[LoanProduct, str]) -> LoanProduct:
    """Look up a product by code (raises InvalidInputError if unknown)"""
    if isinstance(code, LoanProduct):
        return code
    try:
        return LOAN_PRODUCTS[code]
    except KeyError:
        raise InvalidInputError(f"Unknown loan product: {code!r}") from None


def quote_product(product: Union[LoanProduct, str], principal: Number, term_months: int) -> LoanSummary:
    """
    Price a loan at the product's rate.

    Raises:
        InvalidInputError: Unknown product, invalid terms, or principal above
            the product ceiling
    """
    offer = get_product(product)
    terms = validate_loan_terms(principal, offer.annual_rate_percent, term_months)
    if terms.principal > offer.max_amount:
        raise InvalidInputError(
            f"{offer.code} loans are capped at {offer.max_amount}, requested {terms.principal}"
        )
    return summarize_loan(terms.principal, offer.annual_rate_percent, terms.term_months)
