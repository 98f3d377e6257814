"""Domain models - pure Python dataclasses and enums for loan calculations"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Currency(str, Enum):
    """Currencies the portal can display and convert between"""

    EUR = "EUR"
    USD = "USD"
    FCFA = "FCFA"


class RecipientType(str, Enum):
    """Destination of a transfer, selects the fee rate"""

    INTERNAL = "internal"
    EXTERNAL = "external"
    CRYPTO = "crypto"


@dataclass(frozen=True)
class LoanTerms:
    """Validated loan parameters"""

    principal: Decimal
    annual_rate_percent: Decimal  # 5.5 means 5.5%
    term_months: int


@dataclass(frozen=True)
class AmortizationRow:
    """One month of an amortization schedule"""

    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class LoanSummary:
    """Headline figures of a simulated loan"""

    terms: LoanTerms
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    interest_percentage: int
    term_years: Decimal


@dataclass(frozen=True)
class AffordabilityAssessment:
    """Repayment capacity of an applicant for a given loan"""

    monthly_payment: Decimal
    monthly_income: Decimal
    debt_ratio_percent: int
    repayment_capacity: str  # "good" | "limited"
    recommendation: str  # "favorable" | "review"


@dataclass(frozen=True)
class TransferQuote:
    """Fee breakdown for an outgoing transfer"""

    amount: Decimal
    recipient_type: RecipientType
    fee_rate: Decimal
    fee: Decimal
    total: Decimal
