"""Datetime helpers shared by the API layer and the calendar services.

DATE CONVENTION:
Season dates are calendar dates with no time component. They travel as
zero-padded ISO strings (YYYY-MM-DD) at the HTTP and storage boundary and
as ``datetime.date`` everywhere else.

"Today" is the date in the league's home timezone (LOCAL_TIMEZONE), so a
registration that closes on Mar 5 is still open at 11pm Mar 5 local time.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from ..config import settings


def now_utc() -> datetime:
    """Get the current time in UTC, timezone-aware."""
    return datetime.now(timezone.utc)


def today_local(tz_name: str | None = None) -> date:
    """Return the current date in the configured local timezone."""
    return datetime.now(ZoneInfo(tz_name or settings.local_timezone)).date()


def parse_iso_date(value: date | str | None) -> date | None:
    """Parse a YYYY-MM-DD value, returning None for anything malformed.

    Datetimes are truncated to their date. Partial dates ("2026-03") and
    non-padded strings are rejected rather than guessed at.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if len(text) != 10:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def to_iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def is_valid_month(year: int, month: int) -> bool:
    return 1 <= year <= 9999 and 1 <= month <= 12


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of the proleptic Gregorian calendar."""
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the month, both inclusive."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))
