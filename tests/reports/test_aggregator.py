from __future__ import annotations

from datetime import date

from src.school_register.school_register.attendance.model import AttendanceRecord
from src.school_register.school_register.core.enums import AttendanceStatus
from src.school_register.school_register.reports.aggregator import (
    AbsenceRank,
    DistributionSlice,
    absences_on,
    count_by_status,
    distribution,
    monthly_attendance_rate,
    peak_hour,
    rank_by_absences,
    weekday_breakdown,
)

_seq = iter(range(1, 10_000))


def mark(student_id: str, status: str, day: str, *, name: str = "", time: str = "08:00") -> AttendanceRecord:
    return AttendanceRecord(
        id=str(next(_seq)),
        student_id=student_id,
        student_name=name or f"Student {student_id}",
        date=day,
        time=time,
        status=AttendanceStatus(status),
    )


def test_count_by_status():
    records = [mark("1", "present", "2024-03-18"), mark("2", "absent", "2024-03-18"), mark("3", "present", "2024-03-18")]

    assert count_by_status(records) == {"present": 2, "absent": 1}
    assert count_by_status([]) == {"present": 0, "absent": 0}


def test_rank_by_absences_counts_and_last_date():
    records = [
        mark("s1", "absent", "2024-03-01"),
        mark("s1", "absent", "2024-03-10"),
        mark("s2", "absent", "2024-03-05"),
        mark("s2", "present", "2024-03-12"),
    ]

    ranked = rank_by_absences(records, limit=2)

    assert [(r.student_id, r.absence_count, r.last_absence_date) for r in ranked] == [
        ("s1", 2, "2024-03-10"),
        ("s2", 1, "2024-03-05"),
    ]


def test_rank_ties_break_on_recency_then_name():
    records = [
        mark("a", "absent", "2024-03-04", name="Carlos"),
        mark("b", "absent", "2024-03-08", name="Zoe"),
        mark("c", "absent", "2024-03-04", name="Ana"),
    ]

    ranked = rank_by_absences(records, limit=10)

    assert [r.student_name for r in ranked] == ["Zoe", "Ana", "Carlos"]


def test_rank_truncates_and_handles_empty():
    records = [mark(str(i), "absent", "2024-03-04") for i in range(6)]

    assert len(rank_by_absences(records, limit=3)) == 3
    assert rank_by_absences(records, limit=0) == []
    assert rank_by_absences([], limit=5) == []


def test_rank_uses_latest_display_name():
    records = [mark("1", "absent", "2024-03-01", name="Ana"), mark("1", "absent", "2024-03-09", name="Ana García")]

    assert rank_by_absences(records, 5) == [
        AbsenceRank(student_id="1", student_name="Ana García", absence_count=2, last_absence_date="2024-03-09")
    ]


def test_distribution_percentages():
    slices = distribution({"Present": 85, "Justified": 10, "Unjustified": 5})

    assert [s.percent for s in slices] == [85, 10, 5]


def test_distribution_rounds_half_up():
    slices = distribution([("a", 1), ("b", 1), ("c", 2), ("d", 4)])
    assert [s.percent for s in slices] == [13, 13, 25, 50]


def test_distribution_zero_sum():
    assert distribution([("a", 0), ("b", 0)]) == [
        DistributionSlice(name="a", value=0, percent=0),
        DistributionSlice(name="b", value=0, percent=0),
    ]


def test_weekday_breakdown():
    # 2024-03-18 is a Monday, 2024-03-23 a Saturday
    records = [
        mark("1", "present", "2024-03-18"),
        mark("2", "absent", "2024-03-18"),
        mark("1", "present", "2024-03-20"),
    ]

    rows = weekday_breakdown(records)

    assert [r.day for r in rows] == ["Mon", "Tue", "Wed", "Thu", "Fri"]
    assert (rows[0].present, rows[0].absent) == (1, 1)
    assert (rows[2].present, rows[2].absent) == (1, 0)

    with_weekend = weekday_breakdown(records + [mark("3", "present", "2024-03-23")])
    assert [r.day for r in with_weekend][-1] == "Sat"


def test_monthly_attendance_rate_is_chronological():
    records = [
        mark("1", "present", "2024-03-01"),
        mark("2", "absent", "2024-03-02"),
        mark("1", "present", "2024-02-01"),
        mark("2", "present", "2024-02-02"),
        mark("3", "absent", "2024-02-03"),
    ]

    rates = monthly_attendance_rate(records)

    assert [(r.month, r.rate) for r in rates] == [("2024-02", 67), ("2024-03", 50)]


def test_peak_hour():
    records = [
        mark("1", "present", "2024-03-18", time="08:00"),
        mark("2", "present", "2024-03-18", time="08:45"),
        mark("3", "present", "2024-03-18", time="09:00"),
        mark("4", "absent", "2024-03-18", time="09:10"),
        mark("5", "absent", "2024-03-18", time="09:20"),
    ]

    assert peak_hour(records) == "08:00"
    assert peak_hour([]) is None


def test_absences_on_day():
    records = [mark("1", "absent", "2024-03-18"), mark("2", "absent", "2024-03-17"), mark("3", "present", "2024-03-18")]

    assert absences_on(records, date(2024, 3, 18)) == 1


def test_exact_halves_round_up_despite_float_error():
    # 23/40 and 17/40 are 57.5% and 42.5%, which floats store just below the half
    assert [s.percent for s in distribution([("a", 23), ("b", 17)])] == [58, 43]

    records = [mark(str(i), "present", "2024-03-01") for i in range(23)]
    records += [mark(str(i), "absent", "2024-03-02") for i in range(17)]
    assert monthly_attendance_rate(records)[0].rate == 58
