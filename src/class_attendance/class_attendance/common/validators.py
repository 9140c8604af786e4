from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import InvalidOperation
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise InvalidOperation(f"{field_name} must not be empty")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank optional fields (section, roll number) are stored as missing."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_iso_date(value: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise InvalidOperation(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise InvalidOperation(f"Invalid month {month!r}")
    if int(year) < 1:
        raise InvalidOperation(f"Invalid year {year!r}")
    return int(year), int(month)
