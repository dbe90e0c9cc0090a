from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP

from fxwallet.utils.exceptions import ServiceError

CENT = Decimal("0.01")
# Numeric(15, 2) columns hold at most 13 integer digits
MAX_AMOUNT = Decimal(10) ** 13


def to_decimal(value, field="amount"):
    if value is None or isinstance(value, bool):
        raise ServiceError("VALIDATION_ERROR", f"{field} is required", {"field": field})
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ServiceError("VALIDATION_ERROR", f"Invalid {field}", {"field": field})
    if not amount.is_finite():
        raise ServiceError("VALIDATION_ERROR", f"Invalid {field}", {"field": field})
    if abs(amount) >= MAX_AMOUNT:
        raise ServiceError(
            "INVALID_AMOUNT", f"{field} is too large", {"field": field, "max": str(MAX_AMOUNT)}
        )
    return amount


def to_cents(value, field="amount"):
    try:
        return Decimal(value).quantize(CENT)
    except InvalidOperation:
        raise ServiceError("INVALID_AMOUNT", f"Invalid {field}", {"field": field})


def positive_amount(value, field="amount"):
    """Parse a strictly positive money amount with at most two decimal places."""
    amount = to_decimal(value, field)
    if amount <= 0:
        raise ServiceError("INVALID_AMOUNT", f"{field} must be greater than zero", {"field": field})
    if amount != to_cents(amount, field):
        raise ServiceError(
            "INVALID_AMOUNT", f"{field} has more than two decimal places", {"field": field}
        )
    return to_cents(amount, field)


def round_down(value):
    return Decimal(value).quantize(CENT, rounding=ROUND_DOWN)


def format_money(value):
    if value is None:
        return None
    return float(
        Decimal(value).quantize(Decimal("0.00"), rounding=ROUND_HALF_UP)
    )


def percent(part, whole):
    if not whole:
        return 0.0
    return float(Decimal(part or 0) / Decimal(whole) * 100)
