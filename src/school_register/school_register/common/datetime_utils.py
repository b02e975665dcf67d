from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import InvalidDateError, ValidationError


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string into date.

    `date` instances pass through; a `datetime` is reduced to its date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidDateError(value)


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def parse_hhmm(value: str) -> str:
    """Normalize an HH:MM string, e.g. "8:05" -> "08:05"."""
    v = (value or "").strip()
    try:
        return datetime.strptime(v, TIME_FORMAT).strftime(TIME_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")


def to_date(now) -> date:
    """Accept a date or datetime for "now" and keep only the calendar date."""
    if isinstance(now, datetime):
        return now.date()
    if isinstance(now, date):
        return now
    return parse_iso_date(now)


def shift_months(value: date, months: int) -> date:
    """Move `value` by whole calendar months, clamping the day.

    2024-03-31 shifted by -1 gives 2024-02-29; 2024-02-29 by -12 gives 2023-02-28.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
