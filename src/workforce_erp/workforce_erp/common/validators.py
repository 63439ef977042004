from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, min_length: int, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    return value


def to_decimal(value: Any, field_name: str) -> Decimal:
    try:
        # str() first so floats like 12.5 keep their printed value
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} is not a valid number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} is not a valid number")
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount


def require_positive(value: Any, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return amount


def require_non_negative_int(value: Any, field_name: str) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
        # 2.7 must not silently become 2
        if isinstance(value, (float, Decimal)) and value != number:
            raise ValueError(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number
