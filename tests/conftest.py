# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from taskboard.core.config import Settings
from taskboard.db.store import MemoryStore
from taskboard.main import create_app
from taskboard.services.board import BoardService


@pytest.fixture()
def settings() -> Settings:
    """Built directly so tests never read the developer's .env."""
    return Settings(host="127.0.0.1", port="3000", log_colors=False, seed_data=False)


@pytest.fixture()
def empty_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def store() -> MemoryStore:
    """Three users and one task per status."""
    return MemoryStore.seeded()


@pytest.fixture()
def service(store: MemoryStore) -> BoardService:
    return BoardService(store)


@pytest.fixture()
def client(settings: Settings, store: MemoryStore):
    app = create_app(settings, store)
    with TestClient(app) as c:
        yield c
