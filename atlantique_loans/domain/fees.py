"""Transfer fee calculation"""

from decimal import Decimal
from typing import Union

from atlantique_loans.domain.exceptions import InvalidInputError
from atlantique_loans.domain.models import RecipientType, TransferQuote
from atlantique_loans.domain.money import BASE_PRECISION, Number, round_money, to_decimal, wide_context

INTERNAL_FEE_RATE = Decimal("0.01")
EXTERNAL_FEE_RATE = Decimal("0.03")


def parse_recipient_type(value: Union[RecipientType, str]) -> RecipientType:
    if isinstance(value, RecipientType):
        return value
    try:
        return RecipientType(str(value).strip().lower())
    except ValueError:
        raise InvalidInputError(f"Unknown recipient type: {value!r}") from None


def quote_transfer(
    amount: Number,
    recipient_type: Union[RecipientType, str],
    internal_rate: Number = INTERNAL_FEE_RATE,
    external_rate: Number = EXTERNAL_FEE_RATE,
) -> TransferQuote:
    """
    Compute the fee and the total debited for a transfer.

    Internal transfers use the internal rate; external and crypto transfers
    use the external rate.

    Example:
        quote_transfer(250, "external") -> fee 7.50, total 257.50
    """
    value = to_decimal(amount, "amount")
    if value <= 0:
        raise InvalidInputError(f"amount must be positive, got {value}")
    kind = parse_recipient_type(recipient_type)

    rate = to_decimal(internal_rate if kind == RecipientType.INTERNAL else external_rate, "fee_rate")
    with wide_context(value.adjusted() + BASE_PRECISION):
        fee = round_money(value * rate)
        total = round_money(value + fee)

    return TransferQuote(
        amount=value,
        recipient_type=kind,
        fee_rate=rate,
        fee=fee,
        total=total,
    )
