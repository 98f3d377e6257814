"""Property checks for the amortization engine over seeded random loans"""

import random
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext

import pytest

from atlantique_loans.domain.amortization import compute_monthly_payment, generate_amortization_schedule

TERMS = [1, 2, 3, 6, 12, 18, 24, 36, 48, 60, 84, 120, 180, 240, 300, 360]


def _random_loans(count, seed):
    rng = random.Random(seed)
    loans = []
    for _ in range(count):
        principal = Decimal(rng.randint(100, 50_000_000)) / 100
        rate = Decimal(rng.randint(1, 2500)) / 100
        loans.append((principal, rate, rng.choice(TERMS)))
    return loans


LOANS = _random_loans(40, seed=1729)

# Magnitudes far outside the 28-digit default context
EXTREME_LOANS = [
    (Decimal("1000"), Decimal("1e-27"), 12),
    (Decimal("250000"), Decimal("1e-12"), 360),
    (Decimal("0.01"), Decimal("5.5"), 12),
    (Decimal("1e30"), Decimal("5.5"), 24),
    (Decimal("123456789012345678901234567890.12"), Decimal("3.9"), 240),
    (Decimal("500000"), Decimal("999"), 1200),
    (Decimal("1000"), Decimal("1e900"), 12),
]

ALL_LOANS = LOANS + EXTREME_LOANS


def _exact():
    # Row figures can carry hundreds of digits; sum them without rounding
    return localcontext(Context(prec=2000))


@pytest.mark.parametrize("principal, rate, term", ALL_LOANS)
def test_schedule_has_one_row_per_month(principal, rate, term):
    schedule = generate_amortization_schedule(principal, rate, term)
    assert [row.month for row in schedule] == list(range(1, term + 1))


@pytest.mark.parametrize("principal, rate, term", ALL_LOANS)
def test_schedule_closes_at_zero(principal, rate, term):
    schedule = generate_amortization_schedule(principal, rate, term)
    assert schedule[-1].remaining_balance == Decimal("0.00")


@pytest.mark.parametrize("principal, rate, term", ALL_LOANS)
def test_principal_portions_repay_the_principal(principal, rate, term):
    """Each emitted row is rounded once, so drift is at most half a cent per row"""
    schedule = generate_amortization_schedule(principal, rate, term)
    tolerance = Decimal("0.005") * term + Decimal("0.01")
    with _exact():
        repaid = sum(row.principal_portion for row in schedule)
        assert abs(repaid - principal) <= tolerance


@pytest.mark.parametrize("principal, rate, term", ALL_LOANS)
def test_each_row_splits_the_payment(principal, rate, term):
    schedule = generate_amortization_schedule(principal, rate, term)
    with _exact():
        for row in schedule:
            assert abs(row.payment - (row.principal_portion + row.interest_portion)) <= Decimal("0.01")


@pytest.mark.parametrize("principal, rate, term", ALL_LOANS)
def test_balance_never_increases_or_goes_negative(principal, rate, term):
    balances = [row.remaining_balance for row in generate_amortization_schedule(principal, rate, term)]
    assert all(balance >= 0 for balance in balances)
    assert balances == sorted(balances, reverse=True)


@pytest.mark.parametrize("principal, _rate, term", _random_loans(25, seed=42))
def test_zero_rate_payment_is_principal_over_term(principal, _rate, term):
    expected = (principal / term).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    assert compute_monthly_payment(principal, 0, term) == expected


@pytest.mark.parametrize("principal, rate, term", LOANS[:10])
def test_repeated_calls_are_identical(principal, rate, term):
    assert compute_monthly_payment(principal, rate, term) == compute_monthly_payment(principal, rate, term)
    assert generate_amortization_schedule(principal, rate, term) == generate_amortization_schedule(
        principal, rate, term
    )


@pytest.mark.parametrize("principal, term", [(Decimal("25000"), 60), (Decimal("1500.75"), 7), (Decimal("300000"), 360)])
def test_higher_rate_never_lowers_payment(principal, term):
    rates = [Decimal(step) / 4 for step in range(0, 101)]  # 0% .. 25% by 0.25
    payments = [compute_monthly_payment(principal, rate, term) for rate in rates]
    assert payments == sorted(payments)
