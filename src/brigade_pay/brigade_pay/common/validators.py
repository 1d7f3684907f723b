from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name}: pole wymagane")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} musi mieć co najmniej {min_len} znaków")
    return value


def require_positive_decimal(value, field_name: str) -> Decimal:
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name}: wymagana liczba") from None
    if not number.is_finite() or number <= 0:
        raise ValidationError(f"{field_name}: wartość musi być dodatnia")
    return number
