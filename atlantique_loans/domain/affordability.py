"""Repayment capacity check used when reviewing loan applications"""

from decimal import Decimal

from atlantique_loans.domain.amortization import compute_monthly_payment
from atlantique_loans.domain.exceptions import InvalidInputError
from atlantique_loans.domain.models import AffordabilityAssessment
from atlantique_loans.domain.money import BASE_PRECISION, Number, round_to, to_decimal, wide_context

# Income must cover the payment this many times over
INCOME_COVERAGE_FACTOR = 3


def assess_affordability(
    principal: Number,
    annual_rate_percent: Number,
    term_months: int,
    monthly_income: Number,
) -> AffordabilityAssessment:
    """
    Compare the monthly payment against the applicant's income.

    - debt ratio: payment / income, as a whole percentage
    - capacity is "good" when income exceeds 3x the payment, else "limited"
    - recommendation follows capacity: "favorable" or "review"
    """
    income = to_decimal(monthly_income, "monthly_income")
    if income <= 0:
        raise InvalidInputError(f"monthly_income must be positive, got {income}")

    payment = compute_monthly_payment(principal, annual_rate_percent, term_months)
    with wide_context(max(payment.adjusted(), 0) + abs(income.adjusted()) + BASE_PRECISION):
        debt_ratio = int(round_to(payment / income * 100, Decimal("1")))
        covered = income > payment * INCOME_COVERAGE_FACTOR

    return AffordabilityAssessment(
        monthly_payment=payment,
        monthly_income=income,
        debt_ratio_percent=debt_ratio,
        repayment_capacity="good" if covered else "limited",
        recommendation="favorable" if covered else "review",
    )
