"""/v1/currency - display formatting and static conversion"""

import time
from decimal import Decimal

from fastapi import APIRouter, Query, Request

from atlantique_loans.api.dependencies import get_request_id, reject
from atlantique_loans.api.v1.schemas import MAX_AMOUNT, ConvertResponse, FormatResponse, RateSchema, RatesResponse
from atlantique_loans.domain.currency import EXCHANGE_RATES, convert_currency, format_currency, parse_currency
from atlantique_loans.domain.exceptions import DomainException
from atlantique_loans.domain.models import Currency
from atlantique_loans.infrastructure.observability.logging import log_calculation
from atlantique_loans.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.get("/currency/format", response_model=FormatResponse)
def format_amount(
    request: Request,
    amount: Decimal = Query(..., ge=-MAX_AMOUNT, le=MAX_AMOUNT, description="Amount to render"),
    currency: str = Query("EUR", description="EUR, USD or FCFA"),
):
    """Render an amount the way the portal displays it"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        formatted = format_currency(amount, currency)
        code = parse_currency(currency)
    except DomainException as e:
        raise reject(request_id, "format", e)

    record_calculation("format")
    log_calculation(request_id, "format", (time.time() - start_time) * 1000, currency=code.value)
    return FormatResponse(amount=amount, currency=code.value, formatted=formatted)


@router.get("/currency/convert", response_model=ConvertResponse)
def convert_amount(
    request: Request,
    amount: Decimal = Query(..., ge=-MAX_AMOUNT, le=MAX_AMOUNT),
    from_currency: str = Query(..., description="Source currency"),
    to_currency: str = Query(..., description="Target currency"),
):
    """
    Convert with the fixed illustrative rate table.

    Not a market rate: for display only.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        converted = convert_currency(amount, from_currency, to_currency)
        source, target = parse_currency(from_currency), parse_currency(to_currency)
    except DomainException as e:
        raise reject(request_id, "convert", e)

    record_calculation("convert")
    log_calculation(
        request_id,
        "convert",
        (time.time() - start_time) * 1000,
        from_currency=source.value,
        to_currency=target.value,
    )
    return ConvertResponse(
        amount=amount,
        from_currency=source.value,
        to_currency=target.value,
        converted=converted,
    )


@router.get("/currency/rates", response_model=RatesResponse)
def list_rates():
    """Fixed conversion table, units per 1 EUR"""
    return RatesResponse(
        base=Currency.EUR.value,
        rates=[RateSchema(currency=code.value, rate=rate) for code, rate in EXCHANGE_RATES.items()],
    )
