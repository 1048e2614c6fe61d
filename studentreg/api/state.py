"""Shared application state (injected into routes)."""
from typing import Optional

from studentreg.config import DATA_DIR
from studentreg.core.record_store import RecordStore
from studentreg.core.storage import FileStorage, StorageBackend


class AppState:
    def __init__(self, backend: Optional[StorageBackend] = None) -> None:
        self.store = RecordStore(backend if backend is not None else FileStorage(DATA_DIR))

    def load(self) -> None:
        self.store.load()


_state = AppState()


def get_state() -> AppState:
    return _state
