"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the record stores and reports do the work.
"""

from datetime import date, timedelta

from src.school_register.school_register.container import build_container
from src.school_register.school_register.core.enums import RecordKind, TimeWindow


def main():
    container = build_container()
    today = date.today()

    student = container.records.create(RecordKind.STUDENT, {"name": "Ana García", "email": "ana@example.edu"})
    container.records.create(
        RecordKind.ATTENDANCE,
        {
            "student_id": student.id,
            "student_name": student.name,
            "date": (today - timedelta(days=3)).isoformat(),
            "time": "08:00",
            "status": "absent",
        },
    )

    session = container.session(RecordKind.NOTE)
    session.open_new()
    session.submit({"title": "Reunión de profesores", "type": "reminder"})

    print(container.attendance_service.list_in_window(TimeWindow.WEEK, now=today).to_dict())
    print(container.dashboard_service.build(TimeWindow.MONTH, now=today).to_dict())


if __name__ == "__main__":
    main()
