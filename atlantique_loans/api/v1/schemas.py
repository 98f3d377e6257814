"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator

from atlantique_loans.config import settings

# Bounds for the HTTP surface only; the domain functions accept any finite
# input, with a cost that grows with its magnitude
MAX_TERM_MONTHS = 1200
MAX_PRINCIPAL = Decimal("1e15")
MAX_ANNUAL_RATE_PERCENT = Decimal("1000")
MIN_POSITIVE_RATE_PERCENT = Decimal("1e-30")
MAX_AMOUNT = Decimal("1e50")


class LoanTermsRequest(BaseModel):
    """Request body shared by the loan calculation endpoints"""

    principal: Decimal = Field(..., gt=0, le=MAX_PRINCIPAL, description="Amount borrowed")
    annual_rate_percent: Decimal = Field(
        ...,
        ge=0,
        le=MAX_ANNUAL_RATE_PERCENT,
        description="Nominal annual rate, 5.5 means 5.5%",
    )
    term_months: int = Field(..., ge=1, le=MAX_TERM_MONTHS, description="Number of monthly payments")

    @field_validator("annual_rate_percent")
    @classmethod
    def validate_rate(cls, v: Decimal) -> Decimal:
        if 0 < v < MIN_POSITIVE_RATE_PERCENT:
            raise ValueError(f"annual_rate_percent must be 0 or at least {MIN_POSITIVE_RATE_PERCENT}")
        return v


class PaymentResponse(BaseModel):
    """Response for POST /v1/loans/payment"""

    monthly_payment: Decimal


class ScheduleRowSchema(BaseModel):
    """Single month in an amortization schedule"""

    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


class ScheduleResponse(BaseModel):
    """Response for POST /v1/loans/schedule"""

    monthly_payment: Decimal
    term_months: int
    rows: List[ScheduleRowSchema]


class SummaryResponse(BaseModel):
    """Response for POST /v1/loans/summary and product quotes"""

    principal: Decimal
    annual_rate_percent: Decimal
    term_months: int
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    interest_percentage: int
    term_years: Decimal


class AffordabilityRequest(LoanTermsRequest):
    """Request body for POST /v1/loans/affordability"""

    monthly_income: Decimal = Field(
        ..., ge=Decimal("0.01"), le=MAX_AMOUNT, description="Applicant's net monthly income"
    )


class AffordabilityResponse(BaseModel):
    """Response for POST /v1/loans/affordability"""

    monthly_payment: Decimal
    monthly_income: Decimal
    debt_ratio_percent: int
    repayment_capacity: str
    recommendation: str


class ReportRequest(LoanTermsRequest):
    """Request body for POST /v1/loans/report"""

    currency: str = Field(default_factory=lambda: settings.default_currency, description="EUR, USD or FCFA")


class ProductSchema(BaseModel):
    """Loan product offered to clients"""

    code: str
    label: str
    annual_rate_percent: Decimal
    max_amount: Decimal


class ProductsResponse(BaseModel):
    """Response for GET /v1/loans/products"""

    products: List[ProductSchema]


class ProductQuoteRequest(BaseModel):
    """Request body for POST /v1/loans/products/{product}/quote"""

    principal: Decimal = Field(..., gt=0, le=MAX_PRINCIPAL)
    term_months: int = Field(..., ge=1, le=MAX_TERM_MONTHS)


class FormatResponse(BaseModel):
    """Response for GET /v1/currency/format"""

    amount: Decimal
    currency: str
    formatted: str


class ConvertResponse(BaseModel):
    """Response for GET /v1/currency/convert"""

    amount: Decimal
    from_currency: str
    to_currency: str
    converted: Decimal


class RateSchema(BaseModel):
    """Units of a currency per 1 EUR"""

    currency: str
    rate: Decimal


class RatesResponse(BaseModel):
    """Response for GET /v1/currency/rates"""

    base: str
    rates: List[RateSchema]


class TransferQuoteRequest(BaseModel):
    """Request body for POST /v1/transfers/quote"""

    amount: Decimal = Field(..., gt=0, le=MAX_AMOUNT)
    recipient_type: str = Field(..., description="internal, external or crypto")
    currency: str = Field(default_factory=lambda: settings.default_currency)


class TransferQuoteResponse(BaseModel):
    """Response for POST /v1/transfers/quote"""

    amount: Decimal
    recipient_type: str
    currency: str
    fee_rate: Decimal
    fee: Decimal
    total: Decimal
    formatted_fee: str
    formatted_total: str
