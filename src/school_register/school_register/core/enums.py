from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class RecordKind(str, Enum):
    """Loại thực thể được quản lý trong bộ nhớ."""

    ATTENDANCE = "attendance"
    NOTE = "notes"
    STUDENT = "students"

    @classmethod
    def parse(cls, value: str) -> "RecordKind":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown record kind: {value!r}")


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class NoteType(str, Enum):
    REMINDER = "reminder"
    MOTIVATION = "motivation"
    GENERAL = "general"


class TimeWindow(str, Enum):
    """Relative range ending at "now"."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str) -> "TimeWindow":
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except (ValueError, AttributeError):
            raise ValidationError(f"Unknown time window: {value!r} (expected week, month or year)")


class SessionMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


class ChangeType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
