"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from starlist.store.memory import MemoryStarredStore
from starlist.web.app import create_app


@pytest.fixture
def catalog():
    """A small restaurant catalog."""
    return [
        {"id": "r1", "name": "Pho Place"},
        {"id": "r2", "name": "Taqueria Sol", "cuisine": "Mexican"},
        {"id": 3, "name": "Noodle Bar", "neighborhood": "East Village"},
    ]


@pytest.fixture
def memory_store(catalog):
    return MemoryStarredStore(catalog)


@pytest.fixture
def client(memory_store):
    app = create_app(store=memory_store)
    with TestClient(app) as c:
        yield c
