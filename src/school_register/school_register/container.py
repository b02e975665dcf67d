from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .attendance.service import AttendanceService
from .common.identity import IdentityGenerator
from .core.constants import DEFAULT_ABSENCE_RANK_LIMIT
from .core.enums import RecordKind
from .dashboard.service import DashboardService
from .records.registry import RecordRegistry
from .records.session import EditSession


@dataclass(frozen=True)
class Container:
    records: RecordRegistry
    sessions: dict[RecordKind, EditSession]

    attendance_service: AttendanceService
    dashboard_service: DashboardService

    def session(self, kind: RecordKind) -> EditSession:
        return self.sessions[RecordKind(kind)]


def build_container(
    *,
    rank_limit: int = DEFAULT_ABSENCE_RANK_LIMIT,
    ids: Optional[IdentityGenerator] = None,
    today: Optional[Callable[[], date]] = None,
) -> Container:
    records = RecordRegistry(ids, today=today)
    sessions = {kind: EditSession(records.store(kind)) for kind in RecordKind}

    return Container(
        records=records,
        sessions=sessions,
        attendance_service=AttendanceService(records),
        dashboard_service=DashboardService(records, rank_limit=rank_limit),
    )
