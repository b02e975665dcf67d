from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import pick, require_choice
from ..core.enums import NoteType


@dataclass(frozen=True)
class Note:
    """Freeform staff note.

    `created_at` is stamped by the store on creation and never edited.
    """

    id: str
    title: str
    content: str
    type: NoteType
    created_at: str

    @property
    def date(self) -> str:
        return self.created_at

    @classmethod
    def from_payload(cls, record_id: str, payload: dict) -> "Note":
        return cls(
            id=record_id,
            title=str(pick(payload, "title")),
            content=str(pick(payload, "content", "")),
            type=require_choice(pick(payload, "type", NoteType.GENERAL), NoteType, "type"),
            created_at=str(pick(payload, "created_at")),
        )

    def form_values(self) -> dict:
        return {"title": self.title, "content": self.content, "type": self.type}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "type": self.type.value,
            "created_at": self.created_at,
        }
