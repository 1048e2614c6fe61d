"""Persist and load student records (JSON), list edits, and the edit cursor."""
import json
import logging
import threading
from typing import List, Mapping, Optional

from studentreg.config import STORAGE_KEY
from studentreg.core.storage import StorageBackend
from studentreg.core.validation import clean_fields, is_valid_record, validate_record
from studentreg.models.record import StudentRecord
from studentreg.models.validation import SubmitResult

logger = logging.getLogger(__name__)


def load_records(backend: StorageBackend, key: str = STORAGE_KEY) -> List[StudentRecord]:
    """Load the record list from a storage slot. Missing or corrupt data loads as []."""
    raw = backend.get(key)
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        logger.warning("Discarding malformed data in slot %s", key)
        return []
    if not isinstance(data, list):
        logger.warning("Discarding non-list data in slot %s", key)
        return []
    out = []
    for item in data:
        try:
            record = StudentRecord.from_dict(item)
        except (KeyError, TypeError):
            logger.warning("Skipping malformed stored record: %r", item)
            continue
        if not is_valid_record(record):
            logger.warning("Skipping stored record that fails validation: %r", item)
            continue
        out.append(record)
    return out


def save_records(
    backend: StorageBackend, records: List[StudentRecord], key: str = STORAGE_KEY
) -> None:
    """Write the full list, replacing the slot."""
    backend.set(key, json.dumps([r.to_dict() for r in records]))


def add_or_update(
    records: List[StudentRecord], record: StudentRecord, cursor: Optional[int]
) -> List[StudentRecord]:
    """Replace index `cursor` if it is in range, else append. Input is not mutated."""
    out = list(records)
    if cursor is not None and 0 <= cursor < len(out):
        out[cursor] = record
    else:
        out.append(record)
    return out


def delete_at(records: List[StudentRecord], index: int) -> List[StudentRecord]:
    """Remove `index`; out of range returns an unchanged copy."""
    out = list(records)
    if 0 <= index < len(out):
        out.pop(index)
    return out


def shift_cursor(cursor: Optional[int], deleted_index: int) -> Optional[int]:
    """Edit cursor after deleting `deleted_index`: cleared if it pointed there, shifted if after."""
    if cursor is None or cursor == deleted_index:
        return None
    if cursor > deleted_index:
        return cursor - 1
    return cursor


class RecordStore:
    """Owns the record list, the edit cursor, and the storage slot they persist to."""

    def __init__(self, backend: StorageBackend, key: str = STORAGE_KEY) -> None:
        self._backend = backend
        self._key = key
        self._records: List[StudentRecord] = []
        self._edit_cursor: Optional[int] = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> List[StudentRecord]:
        return list(self._records)

    @property
    def edit_cursor(self) -> Optional[int]:
        return self._edit_cursor

    def load(self) -> List[StudentRecord]:
        with self._lock:
            self._records = load_records(self._backend, self._key)
            self._edit_cursor = None
            logger.info("Loaded %d student records", len(self._records))
            return list(self._records)

    def save(self) -> None:
        with self._lock:
            save_records(self._backend, self._records, self._key)

    def submit(self, fields: Mapping[str, Optional[str]]) -> SubmitResult:
        """Validate form fields, then add (no cursor) or update (cursor) and save."""
        result = validate_record(fields)
        if not result.valid:
            return result
        record = clean_fields(fields)
        with self._lock:
            cursor = self._edit_cursor
            updated = add_or_update(self._records, record, cursor)
            save_records(self._backend, updated, self._key)
            self._records = updated
            self._edit_cursor = None
        if cursor is not None and 0 <= cursor < len(updated):
            result.index = cursor
            logger.info("Updated student record %d", cursor)
        else:
            result.index = len(updated) - 1
            logger.info("Added student record %d", result.index)
        return result

    def start_edit(self, index: int) -> Optional[StudentRecord]:
        """Load record `index` into the form. Out of range is a no-op."""
        with self._lock:
            if not 0 <= index < len(self._records):
                return None
            self._edit_cursor = index
            return self._records[index]

    def cancel_edit(self) -> None:
        with self._lock:
            self._edit_cursor = None

    def delete(self, index: int) -> bool:
        """Remove record `index` and save. Returns False (no-op) if out of range."""
        with self._lock:
            if not 0 <= index < len(self._records):
                return False
            updated = delete_at(self._records, index)
            save_records(self._backend, updated, self._key)
            self._records = updated
            self._edit_cursor = shift_cursor(self._edit_cursor, index)
        logger.info("Deleted student record %d", index)
        return True

    def form_values(self) -> dict:
        """Field values for the form: the record under the cursor, or blanks."""
        with self._lock:
            if self._edit_cursor is None:
                return {"name": "", "studentId": "", "class": "", "rollNo": ""}
            return self._records[self._edit_cursor].to_dict()
