from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, TypeVar

from ..common.datetime_utils import parse_iso_date, shift_months, to_date
from ..core.constants import WEEK_DAYS
from ..core.enums import TimeWindow
from ..core.exceptions import InvalidDateError

logger = logging.getLogger(__name__)

R = TypeVar("R")


def window_start(window: TimeWindow, now) -> date:
    """First day (inclusive) of `window` ending at `now`."""
    today = to_date(now)
    window = TimeWindow.parse(window)
    if window is TimeWindow.WEEK:
        return today - timedelta(days=WEEK_DAYS)
    if window is TimeWindow.MONTH:
        return shift_months(today, -1)
    return shift_months(today, -12)


def in_window(record_date, window: TimeWindow, now) -> bool:
    """True when `record_date` is on or after the window start.

    There is no upper bound: future-dated records pass. Raises
    InvalidDateError when `record_date` is not YYYY-MM-DD.
    """
    if record_date is None:
        raise InvalidDateError(record_date)
    return parse_iso_date(record_date) >= window_start(window, now)


def _dated_since(records: Iterable[R], start: date) -> list[R]:
    kept = []
    for record in records:
        if record.date is None:
            # optional dates (a student without enrollment_date) are simply undated
            logger.debug("skipping undated %s", getattr(record, "id", "?"))
            continue
        try:
            record_date = parse_iso_date(record.date)
        except InvalidDateError:
            logger.warning("skipping %s with invalid date %r", getattr(record, "id", "?"), record.date)
            continue
        if record_date >= start:
            kept.append(record)
    return kept


def filter_by_window(records: Iterable[R], window: TimeWindow, now) -> list[R]:
    """Keep the records whose `date` falls inside the window, in input order.

    Records without a date or with an unparseable one are left out of every
    window.
    """
    return _dated_since(records, window_start(window, now))


def filter_last_days(records: Iterable[R], days: int, now) -> list[R]:
    """Records dated within the `days` calendar days ending at `now` (inclusive).

    `days=7` spans exactly one of each weekday, unlike the week window whose
    inclusive start reaches back to the same weekday as `now`.
    """
    return _dated_since(records, to_date(now) - timedelta(days=int(days) - 1))
