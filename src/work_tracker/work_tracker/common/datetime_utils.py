from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple

from ..core.constants import DEFAULT_TIMEZONE_OFFSET_HOURS
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value))


def parse_date_range(start: str, end: str) -> Tuple[date, date]:
    """Parse both ends of a range.

    An inverted range is not an error: it simply matches no reports.
    """
    return parse_iso_date(start), parse_iso_date(end)


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local(offset_hours: int = DEFAULT_TIMEZONE_OFFSET_HOURS) -> datetime:
    """Current time in the office timezone (fixed UTC offset).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone(timedelta(hours=offset_hours)))


def today_local(offset_hours: int = DEFAULT_TIMEZONE_OFFSET_HOURS) -> date:
    return now_local(offset_hours).date()


def week_range(day: date) -> Tuple[date, date]:
    """Seven days starting at ``day``; the default export window."""
    return day, day + timedelta(days=6)


def month_range(day: date) -> Tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
