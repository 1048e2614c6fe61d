"""Core: field validation, storage slots, record store, table view-model."""
from studentreg.core.record_store import RecordStore
from studentreg.core.storage import FileStorage, MemoryStorage

__all__ = ["RecordStore", "FileStorage", "MemoryStorage"]
