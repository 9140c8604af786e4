from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def month_prefix(year: int, month: int) -> str:
    """Zero padded ``YYYY-MM`` prefix shared by every date in that month."""
    return f"{int(year):04d}-{int(month):02d}"


def month_name(month: int) -> str:
    return calendar.month_name[int(month)]


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
