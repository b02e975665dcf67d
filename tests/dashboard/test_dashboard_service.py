from __future__ import annotations

from datetime import date

import pytest

from src.school_register.school_register.common.identity import IdentityGenerator
from src.school_register.school_register.core.enums import RecordKind, TimeWindow
from src.school_register.school_register.dashboard.service import DashboardService
from src.school_register.school_register.records.registry import RecordRegistry

NOW = date(2024, 3, 18)


@pytest.fixture
def registry():
    registry = RecordRegistry(IdentityGenerator())
    ana = registry.create(RecordKind.STUDENT, {"name": "Ana García", "email": "ana@x.edu"})
    carlos = registry.create(RecordKind.STUDENT, {"name": "Carlos López", "email": "carlos@x.edu"})

    rows = [
        (ana, "2024-03-18", "08:00", "absent"),
        (ana, "2024-03-14", "08:00", "absent"),
        (ana, "2024-02-26", "08:00", "absent"),
        (carlos, "2024-03-18", "08:15", "present"),
        (carlos, "2024-03-13", "08:10", "absent"),
        (carlos, "2024-03-12", "09:05", "present"),
        (carlos, "2023-01-05", "08:00", "absent"),
    ]
    for student, day, time, status in rows:
        registry.create(
            RecordKind.ATTENDANCE,
            {"student_id": student.id, "student_name": student.name, "date": day, "time": time, "status": status},
        )
    return registry


def test_week_dashboard(registry):
    report = DashboardService(registry).build(TimeWindow.WEEK, now=NOW)

    assert report.total_students == 2
    assert report.today_absences == 1
    assert report.peak_hour == "08:00"
    assert [(s.name, s.value, s.percent) for s in report.distribution] == [("Present", 2, 40), ("Absent", 3, 60)]
    assert [(r.student_name, r.absence_count) for r in report.top_absences] == [("Ana García", 2), ("Carlos López", 1)]


def test_month_window_widens_ranking(registry):
    report = DashboardService(registry, rank_limit=1).build(TimeWindow.MONTH, now=NOW)

    assert len(report.top_absences) == 1
    assert report.top_absences[0].absence_count == 3
    assert report.top_absences[0].last_absence_date == "2024-03-18"


def test_monthly_trend_covers_last_year_only(registry):
    report = DashboardService(registry).build(TimeWindow.WEEK, now=NOW)

    assert [m.month for m in report.monthly_trend] == ["2024-02", "2024-03"]


def test_explicit_limit_overrides_default(registry):
    report = DashboardService(registry, rank_limit=5).build("year", now=NOW, limit=1)

    assert len(report.top_absences) == 1


def test_report_reflects_store_changes(registry):
    service = DashboardService(registry)
    before = service.build(TimeWindow.WEEK, now=NOW)

    for rec in registry.list(RecordKind.ATTENDANCE):
        registry.delete(RecordKind.ATTENDANCE, rec.id)
    after = service.build(TimeWindow.WEEK, now=NOW)

    assert before.today_absences == 1
    assert after.today_absences == 0
    assert after.top_absences == []
    assert after.peak_hour is None
    assert all(s.percent == 0 for s in after.distribution)


def test_to_dict_is_json_ready(registry):
    data = DashboardService(registry).build(TimeWindow.WEEK, now=NOW).to_dict()

    assert data["window"] == "week"
    assert data["weekly_attendance"][0] == {"day": "Mon", "present": 1, "absent": 1}


def test_weekly_chart_counts_each_weekday_once():
    registry = RecordRegistry(IdentityGenerator())
    for day in ("2024-03-11", "2024-03-18"):
        registry.create(RecordKind.ATTENDANCE, {"student_id": "1", "date": day, "time": "08:00", "status": "present"})

    report = DashboardService(registry).build(TimeWindow.WEEK, now=NOW)

    monday = report.weekly_attendance[0]
    assert (monday.day, monday.present, monday.absent) == ("Mon", 1, 0)
    # the week window itself still includes its boundary day
    assert report.distribution[0].value == 2
