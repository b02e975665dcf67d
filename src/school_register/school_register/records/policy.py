from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_iso_date
from ..core.enums import RecordKind
from ..notes.model import Note
from ..students.model import Student


class InsertOrder(str, Enum):
    APPEND = "append"
    PREPEND = "prepend"


class UpdateMode(str, Enum):
    # every field comes from the payload; omitted optional fields fall back to defaults
    OVERWRITE = "overwrite"
    # submitted fields override, the rest are kept from the current record
    MERGE = "merge"


def _no_defaults(today: date) -> dict:
    return {}


def _note_defaults(today: date) -> dict:
    return {"created_at": format_iso_date(today)}


@dataclass(frozen=True)
class KindPolicy:
    """Per-kind rules the store applies on create/update."""

    kind: RecordKind
    factory: Callable[[str, dict], object]
    insert: InsertOrder
    update: UpdateMode
    preserved: tuple[str, ...] = ()
    creation_defaults: Callable[[date], dict] = field(default=_no_defaults)


POLICIES: dict[RecordKind, KindPolicy] = {
    RecordKind.ATTENDANCE: KindPolicy(
        kind=RecordKind.ATTENDANCE,
        factory=AttendanceRecord.from_payload,
        insert=InsertOrder.APPEND,
        update=UpdateMode.OVERWRITE,
    ),
    RecordKind.NOTE: KindPolicy(
        kind=RecordKind.NOTE,
        factory=Note.from_payload,
        insert=InsertOrder.PREPEND,
        update=UpdateMode.MERGE,
        preserved=("created_at",),
        creation_defaults=_note_defaults,
    ),
    RecordKind.STUDENT: KindPolicy(
        kind=RecordKind.STUDENT,
        factory=Student.from_payload,
        insert=InsertOrder.APPEND,
        update=UpdateMode.OVERWRITE,
    ),
}


def policy_for(kind: RecordKind) -> KindPolicy:
    return POLICIES[RecordKind(kind)]
