"""Payload cleaning done on behalf of the presentation layer.

The stores trust what they receive; controllers run these first.
"""
from __future__ import annotations

from typing import Callable

from ..common.validators import (
    optional_iso_date,
    optional_text,
    require_choice,
    require_email,
    require_iso_date,
    require_non_empty,
    require_time,
)
from ..core.enums import AttendanceStatus, NoteType, RecordKind
from ..core.exceptions import ValidationError

# field -> (cleaner, required)
FieldRules = dict[str, tuple[Callable, bool]]

_RULES: dict[RecordKind, FieldRules] = {
    RecordKind.ATTENDANCE: {
        "student_id": (lambda v: require_non_empty(str(v), "student_id"), True),
        "student_name": (optional_text, False),
        "date": (lambda v: require_iso_date(v, "date"), True),
        "time": (lambda v: require_time(v) if v else "", False),
        "status": (lambda v: require_choice(v, AttendanceStatus, "status"), True),
    },
    RecordKind.NOTE: {
        "title": (lambda v: require_non_empty(v, "title"), True),
        "content": (optional_text, False),
        "type": (lambda v: require_choice(v or NoteType.GENERAL.value, NoteType, "type"), False),
    },
    RecordKind.STUDENT: {
        "name": (lambda v: require_non_empty(v, "name"), True),
        "email": (require_email, True),
        "course": (optional_text, False),
        "enrollment_date": (lambda v: optional_iso_date(v, "enrollment_date"), False),
    },
}


def clean_payload(kind: RecordKind, data: dict, *, partial: bool = False) -> dict:
    """Validate a submitted form and keep only the fields the kind knows.

    With `partial`, missing required fields are allowed (merge-style updates).
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    cleaned = {}
    for name, (clean, required) in _RULES[RecordKind(kind)].items():
        if name not in data or data[name] is None:
            if required and not partial:
                raise ValidationError(f"{name} is required")
            continue
        cleaned[name] = clean(data[name])
    return cleaned
