from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import pick, require_choice
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): một lần điểm danh của học sinh."""

    id: str
    student_id: str
    student_name: str
    date: str
    time: str
    status: AttendanceStatus

    @classmethod
    def from_payload(cls, record_id: str, payload: dict) -> "AttendanceRecord":
        return cls(
            id=record_id,
            student_id=str(pick(payload, "student_id")),
            student_name=str(pick(payload, "student_name", "")),
            date=str(pick(payload, "date")),
            time=str(pick(payload, "time", "")),
            status=require_choice(pick(payload, "status"), AttendanceStatus, "status"),
        )

    def form_values(self) -> dict:
        return {
            "student_id": self.student_id,
            "student_name": self.student_name,
            "date": self.date,
            "time": self.time,
            "status": self.status,
        }

    def to_dict(self) -> dict:
        data = self.form_values()
        data["status"] = self.status.value
        return {"id": self.id, **data}
