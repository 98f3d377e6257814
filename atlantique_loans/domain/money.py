"""Decimal helpers shared by every calculation.

All amounts are handled as `Decimal`. Floats are converted through `str()` so
that 5.5 becomes Decimal("5.5") and not its binary approximation.

Arithmetic that must stay exact to the cent runs inside `wide_context`, whose
precision grows with the magnitude of the operands and whose exponent range is
unbounded, so no finite input can trip the default 28-digit context.
"""

from decimal import MAX_EMAX, MIN_EMIN, Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from typing import Union

from atlantique_loans.domain.exceptions import InvalidInputError

Number = Union[int, float, str, Decimal]

# Significant digits kept beyond an amount's integer part
BASE_PRECISION = 28

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Number, field: str = "amount") -> Decimal:
    """Normalize a numeric input to a finite Decimal.

    Raises:
        InvalidInputError: For booleans, unparsable strings, NaN or infinity
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidInputError(f"{field} is not a number: {value!r}") from e
    else:
        raise InvalidInputError(f"{field} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}")
    return result


def wide_context(digits: int):
    """
    Local decimal context with at least `digits` of precision and no practical
    exponent limit.

    Usage:
        with wide_context(amount.adjusted() + BASE_PRECISION):
            ...
    """
    context = getcontext().copy()
    context.prec = max(context.prec, digits)
    context.Emax = MAX_EMAX
    context.Emin = MIN_EMIN
    return localcontext(context)


def round_to(value: Decimal, places: Decimal) -> Decimal:
    """Round half-up to the exponent of `places`, whatever the size of `value`"""
    # Integer digits, the kept fraction digits, and one for a carry (9.995 -> 10.00)
    with wide_context(value.adjusted() - places.as_tuple().exponent + 2):
        return value.quantize(places, rounding=ROUND_HALF_UP)


def round_money(value: Decimal) -> Decimal:
    """Round to cents, ties away from zero"""
    return round_to(value, TWO_PLACES)
