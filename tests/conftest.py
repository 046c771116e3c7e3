"""Shared test fixtures."""

from datetime import datetime, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from category_admin.infrastructure.seed import seed_store
from category_admin.infrastructure.store import RecordStore
from category_admin.main import create_app


@pytest.fixture
def store() -> RecordStore:
    """Empty record store."""
    return RecordStore()


@pytest.fixture
def seeded_store() -> RecordStore:
    """Record store holding the sample rows."""
    store = RecordStore()
    seed_store(store)
    return store


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with a freshly seeded store per test."""
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def base_time() -> datetime:
    """Fixed reference time for upload timestamps."""
    return datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
