"""/v1/loans - payment, schedule, summary, affordability, report and product quotes"""

import time
from datetime import date

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from atlantique_loans.api.dependencies import get_request_id, get_schedule_cache, reject
from atlantique_loans.api.v1.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    LoanTermsRequest,
    PaymentResponse,
    ProductQuoteRequest,
    ProductSchema,
    ProductsResponse,
    ReportRequest,
    ScheduleResponse,
    ScheduleRowSchema,
    SummaryResponse,
)
from atlantique_loans.domain.affordability import assess_affordability
from atlantique_loans.domain.amortization import (
    compute_monthly_payment,
    generate_amortization_schedule,
    summarize_loan,
)
from atlantique_loans.domain.exceptions import DomainException
from atlantique_loans.domain.models import LoanSummary
from atlantique_loans.domain.products import LOAN_PRODUCTS, quote_product
from atlantique_loans.domain.report import render_loan_report, report_filename
from atlantique_loans.infrastructure.cache import TTLCache
from atlantique_loans.infrastructure.observability.logging import log_calculation
from atlantique_loans.infrastructure.observability.metrics import record_cache_lookup, record_calculation

router = APIRouter()


def _elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000


def _summary_response(summary: LoanSummary) -> SummaryResponse:
    return SummaryResponse(
        principal=summary.terms.principal,
        annual_rate_percent=summary.terms.annual_rate_percent,
        term_months=summary.terms.term_months,
        monthly_payment=summary.monthly_payment,
        total_payment=summary.total_payment,
        total_interest=summary.total_interest,
        interest_percentage=summary.interest_percentage,
        term_years=summary.term_years,
    )


@router.post("/loans/payment", response_model=PaymentResponse)
def calculate_payment(body: LoanTermsRequest, request: Request):
    """Fixed monthly payment for the given terms"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        payment = compute_monthly_payment(body.principal, body.annual_rate_percent, body.term_months)
    except DomainException as e:
        raise reject(request_id, "payment", e)

    record_calculation("payment")
    log_calculation(request_id, "payment", _elapsed_ms(start_time), term_months=body.term_months)
    return PaymentResponse(monthly_payment=payment)


@router.post("/loans/schedule", response_model=ScheduleResponse)
def calculate_schedule(
    body: LoanTermsRequest,
    request: Request,
    cache: TTLCache = Depends(get_schedule_cache),
):
    """
    Month-by-month amortization schedule.

    Schedules are cached per (principal, rate, term) for the configured TTL.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    cache_key = (
        f"schedule:{body.principal.normalize()}:{body.annual_rate_percent.normalize()}:{body.term_months}"
    )

    cached = cache.get(cache_key)
    record_cache_lookup(cached is not None)
    if cached is not None:
        log_calculation(request_id, "schedule", _elapsed_ms(start_time), cache="hit")
        return cached

    try:
        rows = generate_amortization_schedule(body.principal, body.annual_rate_percent, body.term_months)
    except DomainException as e:
        raise reject(request_id, "schedule", e)

    response = ScheduleResponse(
        monthly_payment=rows[0].payment,
        term_months=len(rows),
        rows=[
            ScheduleRowSchema(
                month=row.month,
                payment=row.payment,
                principal_portion=row.principal_portion,
                interest_portion=row.interest_portion,
                remaining_balance=row.remaining_balance,
            )
            for row in rows
        ],
    )
    cache.set(cache_key, response)

    record_calculation("schedule", schedule_months=len(rows))
    log_calculation(request_id, "schedule", _elapsed_ms(start_time), cache="miss", term_months=len(rows))
    return response


@router.post("/loans/summary", response_model=SummaryResponse)
def calculate_summary(body: LoanTermsRequest, request: Request):
    """Monthly payment plus total repaid and cost of credit"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        summary = summarize_loan(body.principal, body.annual_rate_percent, body.term_months)
    except DomainException as e:
        raise reject(request_id, "summary", e)

    record_calculation("summary")
    log_calculation(request_id, "summary", _elapsed_ms(start_time))
    return _summary_response(summary)


@router.post("/loans/affordability", response_model=AffordabilityResponse)
def calculate_affordability(body: AffordabilityRequest, request: Request):
    """Debt ratio and repayment capacity for a loan application"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        assessment = assess_affordability(
            body.principal, body.annual_rate_percent, body.term_months, body.monthly_income
        )
    except DomainException as e:
        raise reject(request_id, "affordability", e)

    record_calculation("affordability")
    log_calculation(
        request_id,
        "affordability",
        _elapsed_ms(start_time),
        recommendation=assessment.recommendation,
    )
    return AffordabilityResponse(
        monthly_payment=assessment.monthly_payment,
        monthly_income=assessment.monthly_income,
        debt_ratio_percent=assessment.debt_ratio_percent,
        repayment_capacity=assessment.repayment_capacity,
        recommendation=assessment.recommendation,
    )


@router.post("/loans/report", response_class=PlainTextResponse)
def download_report(body: ReportRequest, request: Request):
    """Simulation report as a plain-text attachment"""
    start_time = time.time()
    request_id = get_request_id(request)
    today = date.today()

    try:
        content = render_loan_report(
            body.principal, body.annual_rate_percent, body.term_months, body.currency, today
        )
        filename = report_filename(body.principal, body.currency, body.term_months, today)
    except DomainException as e:
        raise reject(request_id, "report", e)

    record_calculation("report", schedule_months=body.term_months)
    log_calculation(request_id, "report", _elapsed_ms(start_time), report_filename=filename)
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/loans/products", response_model=ProductsResponse)
def list_products():
    """Loan products with their rates and ceilings"""
    return ProductsResponse(
        products=[
            ProductSchema(
                code=product.code,
                label=product.label,
                annual_rate_percent=product.annual_rate_percent,
                max_amount=product.max_amount,
            )
            for product in LOAN_PRODUCTS.values()
        ]
    )


@router.post("/loans/products/{product}/quote", response_model=SummaryResponse)
def quote_loan_product(product: str, body: ProductQuoteRequest, request: Request):
    """Price a loan at a catalogue product's rate"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        summary = quote_product(product, body.principal, body.term_months)
    except DomainException as e:
        raise reject(request_id, "quote", e)

    record_calculation("quote")
    log_calculation(request_id, "quote", _elapsed_ms(start_time), product=product)
    return _summary_response(summary)
