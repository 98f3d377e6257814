"""Loan amortization engine - monthly payment, schedule and summary.

Pure functions: numbers in, Decimal/dataclasses out. No I/O, no shared state.
"""

from decimal import Decimal, Overflow
from typing import List, Optional

from atlantique_loans.domain.exceptions import InvalidInputError
from atlantique_loans.domain.models import AmortizationRow, LoanSummary, LoanTerms
from atlantique_loans.domain.money import BASE_PRECISION, Number, round_money, round_to, to_decimal, wide_context

MONTHS_PER_YEAR = 12


def validate_loan_terms(principal: Number, annual_rate_percent: Number, term_months: int) -> LoanTerms:
    """
    Check loan parameters and normalize them to Decimal.

    Raises:
        InvalidInputError: principal <= 0, rate < 0, or term not an integer >= 1
    """
    principal_dec = to_decimal(principal, "principal")
    rate_dec = to_decimal(annual_rate_percent, "annual_rate_percent")

    if principal_dec <= 0:
        raise InvalidInputError(f"principal must be positive, got {principal_dec}")
    if rate_dec < 0:
        raise InvalidInputError(f"annual_rate_percent must not be negative, got {rate_dec}")
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidInputError(f"term_months must be an integer, got {term_months!r}")
    if term_months < 1:
        raise InvalidInputError(f"term_months must be at least 1, got {term_months}")

    return LoanTerms(principal=principal_dec, annual_rate_percent=rate_dec, term_months=term_months)


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Nominal annual percentage to monthly fraction (5.5 -> 0.004583...)"""
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def _loan_context(terms: LoanTerms):
    """
    Decimal context for one loan: the principal to well below a cent, plus
    one digit per decade the monthly rate sits away from 1. Without the rate
    digits, 1 + r collapses to 1 for tiny rates, and for huge rates the
    balance is not known finely enough for interest (balance x r) to be exact
    to the cent.
    """
    digits = BASE_PRECISION + max(terms.principal.adjusted() + 1, 0) + len(str(terms.term_months))
    if terms.annual_rate_percent:
        # r = R / 1200 moves the exponent by at most 4
        digits += abs(terms.annual_rate_percent.adjusted()) + 4
    return wide_context(digits)


def _compound(rate: Decimal, months: int) -> Decimal:
    return (1 + rate) ** months


def _exact_payment(terms: LoanTerms, rate: Decimal) -> Decimal:
    if rate == 0:
        return terms.principal / terms.term_months

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    try:
        factor = _compound(rate, terms.term_months)
    except Overflow:
        # (1+r)^n past any exponent: the fraction above is r to every digit kept
        return terms.principal * rate
    return terms.principal * (rate * factor) / (factor - 1)


def compute_monthly_payment(principal: Number, annual_rate_percent: Number, term_months: int) -> Decimal:
    """
    Fixed monthly payment of an amortizing loan, rounded to cents.

    A zero rate is an explicit branch (P / N), not a limit of the general
    formula.

    Example:
        10 000 at 5.5% over 24 months -> 440.96
    """
    terms = validate_loan_terms(principal, annual_rate_percent, term_months)
    with _loan_context(terms):
        return round_money(_exact_payment(terms, monthly_rate(terms.annual_rate_percent)))


def _balance_after(terms: LoanTerms, rate: Decimal, factor: Optional[Decimal], month: int) -> Decimal:
    # Closed form of "balance = balance * (1 + r) - M" after `month` payments.
    # Stepping the recursion instead multiplies its rounding error by (1 + r)
    # every month.
    if rate == 0:
        return terms.principal * (terms.term_months - month) / terms.term_months
    return terms.principal * (factor - _compound(rate, month)) / (factor - 1)


def _principal_repaid(terms: LoanTerms, rate: Decimal, factor: Optional[Decimal], month: int) -> Decimal:
    # Payment minus interest for `month`, taken directly rather than as the
    # difference of two nearly equal balances
    if rate == 0:
        return terms.principal / terms.term_months
    return terms.principal * rate * _compound(rate, month - 1) / (factor - 1)


def generate_amortization_schedule(
    principal: Number,
    annual_rate_percent: Number,
    term_months: int,
) -> List[AmortizationRow]:
    """
    Month-by-month breakdown of a loan.

    Each month's interest is the opening balance times the monthly rate, and
    its principal portion is what the payment leaves after interest. Balance,
    interest and principal are carried at full precision, with a working
    precision sized to the loan; every figure is rounded only when its row is
    emitted. The last row therefore closes at 0.00, and summed principal
    portions differ from the principal by at most half a cent per row.

    Returns:
        One row per month, months numbered 1..term_months
    """
    terms = validate_loan_terms(principal, annual_rate_percent, term_months)

    with _loan_context(terms):
        rate = monthly_rate(terms.annual_rate_percent)
        payment = round_money(_exact_payment(terms, rate))
        factor = _compound(rate, terms.term_months) if rate else None

        opening = terms.principal
        schedule = []
        for month in range(1, terms.term_months + 1):
            interest = opening * rate
            principal_portion = _principal_repaid(terms, rate, factor, month)
            balance = _balance_after(terms, rate, factor, month)

            schedule.append(
                AmortizationRow(
                    month=month,
                    payment=payment,
                    principal_portion=round_money(principal_portion),
                    interest_portion=round_money(interest),
                    remaining_balance=round_money(balance),
                )
            )
            opening = balance

    return schedule


def summarize_loan(principal: Number, annual_rate_percent: Number, term_months: int) -> LoanSummary:
    """
    Totals shown next to a simulation: total repaid, cost of credit and its
    share of the principal.
    """
    terms = validate_loan_terms(principal, annual_rate_percent, term_months)

    with _loan_context(terms):
        payment = round_money(_exact_payment(terms, monthly_rate(terms.annual_rate_percent)))
        total_payment = round_money(payment * terms.term_months)
        total_interest = round_money(total_payment - terms.principal)
        interest_percentage = int(round_to(total_interest / terms.principal * 100, Decimal("1")))
        term_years = round_to(Decimal(terms.term_months) / MONTHS_PER_YEAR, Decimal("0.1"))

    return LoanSummary(
        terms=terms,
        monthly_payment=payment,
        total_payment=total_payment,
        total_interest=total_interest,
        interest_percentage=interest_percentage,
        term_years=term_years,
    )
