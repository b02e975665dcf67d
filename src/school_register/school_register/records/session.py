from __future__ import annotations

from typing import Optional

from ..core.enums import SessionMode
from ..core.exceptions import SessionClosedError
from .store import RecordStore


class EditSession:
    """Binds one form to either creating a record or editing a selected one.

    closed --open_new()--> create
    closed/create --open_edit(id)--> edit
    any --submit()/close()--> closed
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._mode = SessionMode.CLOSED
        self._selected = None

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._mode is not SessionMode.CLOSED

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected.id if self._selected is not None else None

    @property
    def form_values(self) -> dict:
        if self._selected is None:
            return {}
        return self._selected.form_values()

    def open_new(self) -> None:
        self._selected = None
        self._mode = SessionMode.CREATE

    def open_edit(self, record_id: str) -> None:
        # NotFoundError leaves the previous state untouched
        record = self._store.get(record_id)
        self._selected = record
        self._mode = SessionMode.EDIT

    def close(self) -> None:
        self._selected = None
        self._mode = SessionMode.CLOSED

    def submit(self, payload: dict):
        """Create or update depending on the mode, then close.

        NotFoundError from update (the record was deleted meanwhile) is
        propagated after the session has closed.
        """
        if not self.is_open:
            raise SessionClosedError("No open edit session to submit")
        try:
            if self._mode is SessionMode.EDIT:
                return self._store.update(self._selected.id, payload)
            return self._store.create(payload)
        finally:
            self.close()
