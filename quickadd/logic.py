from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .models import CategoryType


DIRECTIONS = {"income", "expense"}


def validate_direction(value: str | CategoryType) -> str:
    if isinstance(value, CategoryType):
        value = value.value.lower()
    if value not in DIRECTIONS:
        raise ValueError("direction must be income or expense")
    return value


def _to_decimal(value: str | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("amount required")
    try:
        return Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError("amount invalid") from e


def parse_amount_to_cents(value: str | Decimal) -> int:
    d = _to_decimal(value)
    if not d.is_finite():
        raise ValueError("amount invalid")
    if d < 0:
        raise ValueError("amount must be non-negative")
    if d == 0:
        raise ValueError("amount required")
    cents = (d * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if (d * 100) != cents:
        raise ValueError("amount supports up to 2 decimals")
    return int(cents)
