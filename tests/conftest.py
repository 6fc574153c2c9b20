"""Shared pytest fixtures for all tests."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from catalog.database import init_database


@pytest.fixture
def test_db(monkeypatch) -> Generator[Path, None, None]:
    """
    Create a temporary test database for each test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        monkeypatch.setattr("catalog.database.DATABASE_PATH", str(db_path))
        monkeypatch.setattr("catalog.config.DATABASE_PATH", str(db_path))
        init_database()
        yield db_path


@pytest.fixture
def client(test_db):
    """
    Create FastAPI test client with startup and shutdown events run.
    """
    from catalog.main import app

    with TestClient(app) as test_client:
        yield test_client
