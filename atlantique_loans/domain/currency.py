"""Currency display and static conversion.

Formatting follows the fr-FR convention used by the portal: thousands grouped
with a space, comma before the cents, symbol after the number.
Conversion rates are a fixed illustrative table, not market data.
"""

from decimal import Decimal
from typing import Dict, Union

from atlantique_loans.domain.exceptions import UnsupportedCurrencyError
from atlantique_loans.domain.models import Currency
from atlantique_loans.domain.money import BASE_PRECISION, Number, round_money, to_decimal, wide_context

CurrencyLike = Union[Currency, str]

# Units of each currency per 1 EUR
EXCHANGE_RATES: Dict[Currency, Decimal] = {
    Currency.EUR: Decimal("1"),
    Currency.USD: Decimal("1.08"),
    Currency.FCFA: Decimal("655.957"),
}

CURRENCY_SYMBOLS: Dict[Currency, str] = {
    Currency.EUR: "€",
    Currency.USD: "$US",
    Currency.FCFA: "F CFA",
}

_ALIASES = {"XOF": Currency.FCFA}


def parse_currency(code: CurrencyLike) -> Currency:
    """
    Resolve a currency code to the closed Currency set.

    Codes are matched case-insensitively; the ISO code XOF is accepted for FCFA.

    Raises:
        UnsupportedCurrencyError: For anything outside the supported set
    """
    if isinstance(code, Currency):
        return code
    if not isinstance(code, str):
        raise UnsupportedCurrencyError(code)

    normalized = code.strip().upper()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    try:
        return Currency(normalized)
    except ValueError as e:
        raise UnsupportedCurrencyError(code) from e


def format_currency(amount: Number, currency: CurrencyLike) -> str:
    """
    Render an amount with exactly two fraction digits and the currency symbol.

    Example:
        format_currency(1234.5, "EUR") -> "1 234,50 €"
    """
    code = parse_currency(currency)
    value = round_money(to_decimal(amount, "amount"))

    sign = "-" if value < 0 else ""
    grouped = f"{value.copy_abs():,.2f}".replace(",", " ").replace(".", ",")
    return f"{sign}{grouped} {CURRENCY_SYMBOLS[code]}"


def convert_currency(amount: Number, from_currency: CurrencyLike, to_currency: CurrencyLike) -> Decimal:
    """
    Convert through EUR using the fixed rate table, rounded to cents.

    Converting to the same currency returns the amount unchanged, without
    rounding.
    """
    source = parse_currency(from_currency)
    target = parse_currency(to_currency)
    value = to_decimal(amount, "amount")

    if source == target:
        return value

    with wide_context(value.adjusted() + BASE_PRECISION):
        eur_amount = value / EXCHANGE_RATES[source]
        return round_money(eur_amount * EXCHANGE_RATES[target])
