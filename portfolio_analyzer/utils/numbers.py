"""Decimal coercion helpers."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from portfolio_analyzer.domain.exceptions import ValidationError

Number = Union[Decimal, int, float, str]

# Storage scale of the price and quantity columns
PRICE_SCALE = Decimal("0.0001")
QUANTITY_SCALE = Decimal("0.000001")


def to_decimal(value: Number, field_name: str = "value") -> Decimal:
    """
    Convert user or DB input to a finite Decimal.

    Floats go through str() so 150.1 stays 150.1 and not its binary expansion.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValidationError(f"{field_name} must be numeric, got {value!r}") from None

    if not result.is_finite():
        raise ValidationError(f"{field_name} must be finite, got {value!r}")
    return result


def _quantize(value: Number, scale: Decimal, field_name: str) -> Decimal:
    result = to_decimal(value, field_name)
    try:
        return result.quantize(scale, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"{field_name} is out of range, got {value!r}") from None


def quantize_price(value: Number, field_name: str = "price") -> Decimal:
    """Decimal rounded half-up to the 4 places a stored price keeps."""
    return _quantize(value, PRICE_SCALE, field_name)


def quantize_quantity(value: Number, field_name: str = "quantity") -> Decimal:
    """Decimal rounded half-up to the 6 places a stored quantity keeps."""
    return _quantize(value, QUANTITY_SCALE, field_name)
