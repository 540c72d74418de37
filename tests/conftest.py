"""Shared fixtures: a throwaway SQLite database and a test client per test."""

import pytest
from fastapi.testclient import TestClient

from concert_lab_api.app.core.config import settings
from concert_lab_api.app.main import create_app
from concert_lab_api.app.services.concert_store import ConcertStore


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the application at an empty database file for the duration of a test."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    return db_path


@pytest.fixture
def store():
    return ConcertStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
