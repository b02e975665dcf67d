from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Generic, Optional, TypeVar

from ..common.datetime_utils import today_local
from ..common.identity import IdentityGenerator
from ..core.enums import ChangeType, RecordKind
from ..core.exceptions import IdentityCollisionError, NotFoundError
from .policy import InsertOrder, KindPolicy, UpdateMode

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class ChangeEvent:
    kind: RecordKind
    change: ChangeType
    record: object


Listener = Callable[[ChangeEvent], None]


class RecordStore(Generic[R]):
    """Owned, ordered in-memory collection for one record kind.

    The store is the single source of truth; readers get point-in-time copies
    from `list()` and observers learn about mutations through `subscribe()`.
    """

    def __init__(
        self,
        policy: KindPolicy,
        ids: IdentityGenerator,
        *,
        today: Optional[Callable[[], date]] = None,
    ):
        self._policy = policy
        self._ids = ids
        self._today = today or today_local
        self._items: list[R] = []
        self._listeners: list[Listener] = []

    @property
    def kind(self) -> RecordKind:
        return self._policy.kind

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[R]:
        return list(self._items)

    def get(self, record_id: str) -> R:
        return self._items[self._index_of(record_id)]

    def create(self, payload: dict) -> R:
        record_id = self._ids.next()
        if self._find(record_id) is not None:
            raise IdentityCollisionError(f"{self.kind.value} id {record_id!r} already exists")

        values = dict(payload or {})
        values.update(self._policy.creation_defaults(self._today()))
        record = self._policy.factory(record_id, values)

        if self._policy.insert is InsertOrder.PREPEND:
            self._items.insert(0, record)
        else:
            self._items.append(record)

        logger.debug("created %s %s", self.kind.value, record_id)
        self._emit(ChangeType.CREATED, record)
        return record

    def update(self, record_id: str, payload: dict) -> R:
        index = self._index_of(record_id)
        current = self._items[index]

        if self._policy.update is UpdateMode.MERGE:
            values = {**current.form_values(), **(payload or {})}
        else:
            values = dict(payload or {})
        for name in self._policy.preserved:
            values[name] = getattr(current, name)

        record = self._policy.factory(current.id, values)
        self._items[index] = record

        logger.debug("updated %s %s", self.kind.value, record_id)
        self._emit(ChangeType.UPDATED, record)
        return record

    def delete(self, record_id: str) -> R:
        record = self._items.pop(self._index_of(record_id))
        logger.debug("deleted %s %s", self.kind.value, record_id)
        self._emit(ChangeType.DELETED, record)
        return record

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _find(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._items):
            if record.id == record_id:
                return index
        return None

    def _index_of(self, record_id: str) -> int:
        index = self._find(str(record_id))
        if index is None:
            raise NotFoundError(self.kind, record_id)
        return index

    def _emit(self, change: ChangeType, record: R) -> None:
        event = ChangeEvent(kind=self.kind, change=change, record=record)
        for listener in list(self._listeners):
            listener(event)
