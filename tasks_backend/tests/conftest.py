from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from taskapi.main import create_app
from taskapi.repositories import InMemoryTaskStore


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def client(store: InMemoryTaskStore) -> TestClient:
    """
    A client bound to a fresh app and an empty store, so ids start at 1 in
    every test.
    """
    return TestClient(create_app(store))
