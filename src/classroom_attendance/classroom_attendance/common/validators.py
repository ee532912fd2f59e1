from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_iso_date


def is_blank(value) -> bool:
    return not value or not str(value).strip()


def require_iso_date(value: str, field_name: str) -> str:
    if not is_iso_date(value):
        raise ValidationError(f"{field_name} debe tener el formato AAAA-MM-DD")
    return value


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser un número entero") from None
    if number <= 0:
        raise ValidationError(f"{field_name} debe ser mayor que cero")
    return number
