from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

from ..core.exceptions import ValidationError

_DATE_PREFIX_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:$|T)")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date_key(value: Union[str, date, None]) -> str:
    """Canonical ``YYYY-MM-DD`` key built from local calendar fields.

    Strings must be a bare date or an ISO timestamp; the part after ``T`` is
    dropped (``2024-03-05T23:30:00Z`` is ``2024-03-05``) and no timezone
    conversion is ever applied.
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")

    m = _DATE_PREFIX_RE.match(str(value or "").strip())
    if not m:
        raise ValidationError("Invalid date. Expected YYYY-MM-DD.")
    try:
        date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise ValidationError("Invalid date. Expected YYYY-MM-DD.")
    return f"{m.group(1)}-{m.group(2)}-{m.group(3)}"


def to_date(value: Union[str, date, None]) -> date:
    return parse_iso_date(to_date_key(value))


def parse_month(value: Optional[str]) -> tuple[int, int]:
    """Parse ``YYYY-MM`` into ``(year, month)``."""
    m = _MONTH_RE.match(str(value or "").strip())
    if not m:
        raise ValidationError("month must be YYYY-MM")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise ValidationError("month must be YYYY-MM")
    return year, month


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def weekday_of(day: date) -> int:
    """Weekday index with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def to_time_key(value: Optional[str]) -> str:
    """Return a strict 24h ``HH:MM`` string, or ``""`` when not valid."""
    s = str(value or "").strip()
    m = _TIME_RE.match(s)
    if not m:
        return ""
    hh, mm = int(m.group(1)), int(m.group(2))
    if hh > 23 or mm > 59:
        return ""
    return s


def minutes_of(value: Optional[str]) -> Optional[int]:
    s = to_time_key(value)
    if not s:
        return None
    hh, mm = s.split(":")
    return int(hh) * 60 + int(mm)


def format_hhmm(moment: datetime) -> str:
    return moment.strftime("%H:%M")
