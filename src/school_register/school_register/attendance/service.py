from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RecordKind, TimeWindow
from ..records.registry import RecordRegistry
from ..reports.aggregator import count_by_status
from ..reports.window import filter_by_window
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceWindowView:
    window: TimeWindow
    records: list[AttendanceRecord]
    counts: dict[str, int]

    def to_dict(self) -> dict:
        return {
            "window": self.window.value,
            "records": [r.to_dict() for r in self.records],
            "counts": dict(self.counts),
        }


class AttendanceService:
    """Use case: the attendance page (window-scoped table)."""

    def __init__(self, records: RecordRegistry):
        self._records = records

    def list_in_window(self, window: TimeWindow, *, now) -> AttendanceWindowView:
        window = TimeWindow.parse(window)
        rows = filter_by_window(self._records.list(RecordKind.ATTENDANCE), window, now)
        return AttendanceWindowView(window=window, records=rows, counts=count_by_status(rows))
