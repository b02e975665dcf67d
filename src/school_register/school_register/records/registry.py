from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..common.identity import IdentityGenerator
from ..core.enums import RecordKind
from .policy import POLICIES
from .store import RecordStore


class RecordRegistry:
    """Kind-keyed entry point used by services and controllers."""

    def __init__(
        self,
        ids: Optional[IdentityGenerator] = None,
        *,
        today: Optional[Callable[[], date]] = None,
    ):
        self._ids = ids or IdentityGenerator()
        self._stores = {kind: RecordStore(policy, self._ids, today=today) for kind, policy in POLICIES.items()}

    def store(self, kind: RecordKind) -> RecordStore:
        return self._stores[RecordKind(kind)]

    def list(self, kind: RecordKind) -> list:
        return self.store(kind).list()

    def get(self, kind: RecordKind, record_id: str):
        return self.store(kind).get(record_id)

    def create(self, kind: RecordKind, payload: dict):
        return self.store(kind).create(payload)

    def update(self, kind: RecordKind, record_id: str, payload: dict):
        return self.store(kind).update(record_id, payload)

    def delete(self, kind: RecordKind, record_id: str):
        return self.store(kind).delete(record_id)
