from __future__ import annotations

import dataclasses
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date, today_local

CENTS = Decimal("0.01")


def to_jsonable(value: Any) -> Any:
    """Convert domain dataclasses into JSON-friendly structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value.quantize(CENTS))
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def json_errors(view):
    """Translate domain errors raised by a view into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def date_value(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def time_value(value: Any, field_name: str) -> time:
    try:
        return parse_hhmm(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a time (HH:MM)")


def optional_json_body() -> dict:
    """Like ``json_body`` but an empty body reads as ``{}``."""
    if not request.get_data():
        return {}
    return json_body()


def int_value(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")


def bool_value(data: dict, name: str, default: bool = False) -> bool:
    value = data.get(name, default)
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be true or false")
    return value


def int_arg(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    return int_value(raw, name)


def check_year_month(year: int, month: int) -> tuple[int, int]:
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"year must be between {MINYEAR} and {MAXYEAR}")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return year, month


def month_args() -> tuple[int, int]:
    """Read ``year`` and ``month`` query arguments, defaulting to the current month."""
    today = today_local()
    return check_year_month(int_arg("year", today.year), int_arg("month", today.month))


def body_month(data: dict) -> tuple[int, int]:
    year, month = month_args()
    if "year" in data:
        year = int_value(data["year"], "year")
    if "month" in data:
        month = int_value(data["month"], "month")
    return check_year_month(year, month)
