"""Demo data so a fresh process has something to show."""
from __future__ import annotations

import logging

from .core.enums import RecordKind
from .records.registry import RecordRegistry

logger = logging.getLogger(__name__)

DEMO_STUDENTS = [
    {"name": "Ana García", "email": "ana.garcia@example.edu", "course": "1A", "enrollment_date": "2023-09-01"},
    {"name": "Carlos López", "email": "carlos.lopez@example.edu", "course": "1A", "enrollment_date": "2023-09-01"},
]

DEMO_NOTES = [
    {
        "title": "Mensaje motivacional",
        "content": "¡El éxito es la suma de pequeños esfuerzos repetidos día tras día!",
        "type": "motivation",
    },
    {"title": "Reunión de profesores", "content": "Recordar agenda para la reunión del lunes", "type": "reminder"},
]


def seed_demo_data(records: RecordRegistry, *, today: str) -> None:
    """Load two students, one attendance mark each for `today`, and two notes.

    Only seeds an empty registry.
    """
    if any(records.list(kind) for kind in RecordKind):
        logger.info("demo seed skipped: registry is not empty")
        return

    students = [records.create(RecordKind.STUDENT, payload) for payload in DEMO_STUDENTS]
    for student, (time, status) in zip(students, [("08:00", "present"), ("08:15", "absent")]):
        records.create(
            RecordKind.ATTENDANCE,
            {
                "student_id": student.id,
                "student_name": student.name,
                "date": today,
                "time": time,
                "status": status,
            },
        )
    # notes prepend, so the last one created is shown first
    for payload in DEMO_NOTES:
        records.create(RecordKind.NOTE, payload)

    logger.info("demo seed loaded (%d students)", len(students))
