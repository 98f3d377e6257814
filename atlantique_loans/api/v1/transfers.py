"""POST /v1/transfers/quote - fee preview before a transfer is submitted"""

import time

from fastapi import APIRouter, Request

from atlantique_loans.api.dependencies import get_request_id, reject
from atlantique_loans.api.v1.schemas import TransferQuoteRequest, TransferQuoteResponse
from atlantique_loans.config import settings
from atlantique_loans.domain.currency import format_currency, parse_currency
from atlantique_loans.domain.exceptions import DomainException
from atlantique_loans.domain.fees import quote_transfer
from atlantique_loans.infrastructure.observability.logging import log_calculation
from atlantique_loans.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/transfers/quote", response_model=TransferQuoteResponse)
def create_transfer_quote(body: TransferQuoteRequest, request: Request):
    """
    Quote the fee and total debited for a transfer.

    Rates come from settings: internal transfers use the internal rate,
    external and crypto transfers the external rate.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        code = parse_currency(body.currency)
        quote = quote_transfer(
            body.amount,
            body.recipient_type,
            internal_rate=settings.internal_transfer_fee_rate,
            external_rate=settings.external_transfer_fee_rate,
        )
    except DomainException as e:
        raise reject(request_id, "transfer", e)

    record_calculation("transfer")
    log_calculation(
        request_id,
        "transfer",
        (time.time() - start_time) * 1000,
        recipient_type=quote.recipient_type.value,
    )
    return TransferQuoteResponse(
        amount=quote.amount,
        recipient_type=quote.recipient_type.value,
        currency=code.value,
        fee_rate=quote.fee_rate,
        fee=quote.fee,
        total=quote.total,
        formatted_fee=format_currency(quote.fee, code),
        formatted_total=format_currency(quote.total, code),
    )
