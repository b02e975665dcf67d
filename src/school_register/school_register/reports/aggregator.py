"""Pure statistics over (already filtered) record sequences.

Nothing here touches a store or reads the clock; the same input always gives
the same output.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso_date, parse_iso_date, to_date
from ..core.constants import SCHOOL_DAYS, WEEKDAY_LABELS
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AbsenceRank:
    student_id: str
    student_name: str
    absence_count: int
    last_absence_date: str


@dataclass(frozen=True)
class DistributionSlice:
    name: str
    value: int
    percent: int


@dataclass(frozen=True)
class WeekdayCount:
    day: str
    present: int
    absent: int


@dataclass(frozen=True)
class MonthlyRate:
    month: str
    rate: int


def percent_of(part: int, total: int) -> int:
    """`part / total * 100` rounded half up, in integer arithmetic; 0 when total is 0."""
    if not total:
        return 0
    return (200 * int(part) + total) // (2 * total)


def count_by_status(records: Iterable[AttendanceRecord]) -> dict[str, int]:
    counts = {status.value: 0 for status in AttendanceStatus}
    for r in records:
        counts[r.status.value] += 1
    return counts


def rank_by_absences(records: Iterable[AttendanceRecord], limit: int) -> list[AbsenceRank]:
    groups: dict[str, dict] = {}
    for r in records:
        if r.status != AttendanceStatus.ABSENT:
            continue
        day = parse_iso_date(r.date)
        g = groups.get(r.student_id)
        if not g:
            g = {"name": r.student_name, "count": 0, "last": day}
            groups[r.student_id] = g
        g["count"] += 1
        if day >= g["last"]:
            g["last"] = day
            g["name"] = r.student_name or g["name"]

    ranked = sorted(
        groups.items(),
        key=lambda item: (-item[1]["count"], -item[1]["last"].toordinal(), item[1]["name"]),
    )
    return [
        AbsenceRank(
            student_id=student_id,
            student_name=g["name"],
            absence_count=g["count"],
            last_absence_date=format_iso_date(g["last"]),
        )
        for student_id, g in ranked[: max(int(limit), 0)]
    ]


def distribution(
    category_counts: Union[Mapping[str, int], Iterable[tuple[str, int]]],
) -> list[DistributionSlice]:
    """Share of each category in percent (whole numbers, half rounds up).

    A zero total gives 0 percent everywhere.
    """
    items = list(category_counts.items() if isinstance(category_counts, Mapping) else category_counts)
    total = sum(int(value) for _, value in items)
    out = []
    for name, value in items:
        out.append(DistributionSlice(name=str(name), value=int(value), percent=percent_of(value, total)))
    return out


def weekday_breakdown(records: Iterable[AttendanceRecord]) -> list[WeekdayCount]:
    present: Counter = Counter()
    absent: Counter = Counter()
    for r in records:
        weekday = parse_iso_date(r.date).weekday()
        if r.status == AttendanceStatus.PRESENT:
            present[weekday] += 1
        else:
            absent[weekday] += 1

    # school days always show; weekend rows only when something happened
    days = [d for d in range(len(WEEKDAY_LABELS)) if d < SCHOOL_DAYS or present[d] or absent[d]]
    return [WeekdayCount(day=WEEKDAY_LABELS[d], present=present[d], absent=absent[d]) for d in days]


def monthly_attendance_rate(records: Iterable[AttendanceRecord]) -> list[MonthlyRate]:
    totals: Counter = Counter()
    present: Counter = Counter()
    for r in records:
        month = parse_iso_date(r.date).strftime("%Y-%m")
        totals[month] += 1
        if r.status == AttendanceStatus.PRESENT:
            present[month] += 1
    return [
        MonthlyRate(month=month, rate=percent_of(present[month], totals[month]))
        for month in sorted(totals)
    ]


def peak_hour(records: Iterable[AttendanceRecord]) -> Optional[str]:
    hours: Counter = Counter()
    for r in records:
        if r.status != AttendanceStatus.PRESENT or not r.time:
            continue
        hour = r.time.split(":", 1)[0]
        if hour.isdigit():
            hours[int(hour)] += 1
    if not hours:
        return None
    best = min(hours, key=lambda h: (-hours[h], h))
    return f"{best:02d}:00"


def absences_on(records: Sequence[AttendanceRecord], day) -> int:
    target: date = to_date(day)
    return sum(1 for r in records if r.status == AttendanceStatus.ABSENT and parse_iso_date(r.date) == target)
