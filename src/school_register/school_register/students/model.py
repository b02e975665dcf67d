from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import pick


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Student."""

    id: str
    name: str
    email: str
    course: str = ""
    enrollment_date: Optional[str] = None

    @property
    def date(self) -> Optional[str]:
        return self.enrollment_date

    @classmethod
    def from_payload(cls, record_id: str, payload: dict) -> "Student":
        enrollment_date = pick(payload, "enrollment_date", None)
        return cls(
            id=record_id,
            name=str(pick(payload, "name")),
            email=str(pick(payload, "email")),
            course=str(pick(payload, "course", "")),
            enrollment_date=str(enrollment_date) if enrollment_date else None,
        )

    def form_values(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "course": self.course,
            "enrollment_date": self.enrollment_date,
        }

    def to_dict(self) -> dict:
        return {"id": self.id, **self.form_values()}
