"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from roster_backend.api import create_api
from roster_backend.database import DatabaseService
from roster_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", IN_MEMORY_URL)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """Fresh volatile store for a single test."""
    service = DatabaseService(IN_MEMORY_URL)
    service.create_schema()
    yield service
    service.dispose()


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(database=database)
    with TestClient(app) as test_client:
        yield test_client
