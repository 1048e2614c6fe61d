"""Shared fixtures: in-memory storage, store, and an API client bound to them."""
import pytest
from fastapi.testclient import TestClient

from studentreg.api.app import app
from studentreg.api.state import AppState, get_state
from studentreg.core.record_store import RecordStore
from studentreg.core.storage import MemoryStorage

JANE = {"name": "Jane Doe", "studentId": "101", "class": "10A", "rollNo": "5"}
JOHN = {"name": "John Smith", "studentId": "102", "class": "10B", "rollNo": "6"}
ASHA = {"name": "Asha Rao", "studentId": "0103", "class": "9C", "rollNo": "07"}


@pytest.fixture
def backend() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(backend: MemoryStorage) -> RecordStore:
    s = RecordStore(backend)
    s.load()
    return s


@pytest.fixture
def state(backend: MemoryStorage) -> AppState:
    st = AppState(backend)
    st.load()
    return st


@pytest.fixture
def client(state: AppState):
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
