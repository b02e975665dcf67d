from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.constants import DEFAULT_ABSENCE_RANK_LIMIT, STATUS_LABELS, WEEK_DAYS
from ..core.enums import RecordKind, TimeWindow
from ..records.registry import RecordRegistry
from ..reports.aggregator import (
    AbsenceRank,
    DistributionSlice,
    MonthlyRate,
    WeekdayCount,
    absences_on,
    count_by_status,
    distribution,
    monthly_attendance_rate,
    peak_hour,
    rank_by_absences,
    weekday_breakdown,
)
from ..reports.window import filter_by_window, filter_last_days


@dataclass(frozen=True)
class DashboardReport:
    window: TimeWindow
    total_students: int
    today_absences: int
    peak_hour: Optional[str]
    weekly_attendance: list[WeekdayCount]
    monthly_trend: list[MonthlyRate]
    distribution: list[DistributionSlice]
    top_absences: list[AbsenceRank]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["window"] = self.window.value
        return data


class DashboardService:
    """Builds every dashboard widget from the live stores.

    Nothing is cached: each call re-reads the stores and re-derives the
    statistics for the given `now`.
    """

    def __init__(self, records: RecordRegistry, *, rank_limit: int = DEFAULT_ABSENCE_RANK_LIMIT):
        self._records = records
        self._rank_limit = int(rank_limit)

    def build(self, window: TimeWindow, *, now, limit: Optional[int] = None) -> DashboardReport:
        window = TimeWindow.parse(window)
        attendance = self._records.list(RecordKind.ATTENDANCE)

        in_window = filter_by_window(attendance, window, now)
        last_seven_days = filter_last_days(attendance, WEEK_DAYS, now)
        this_year = filter_by_window(attendance, TimeWindow.YEAR, now)

        counts = count_by_status(in_window)
        slices = distribution({STATUS_LABELS[k]: v for k, v in counts.items()})

        return DashboardReport(
            window=window,
            total_students=len(self._records.store(RecordKind.STUDENT)),
            today_absences=absences_on(last_seven_days, now),
            peak_hour=peak_hour(in_window),
            weekly_attendance=weekday_breakdown(last_seven_days),
            monthly_trend=monthly_attendance_rate(this_year),
            distribution=slices,
            top_absences=rank_by_absences(in_window, self._rank_limit if limit is None else limit),
        )
