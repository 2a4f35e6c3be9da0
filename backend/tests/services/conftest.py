"""Service test fixtures — temp-file store + FastAPI test client.

Invariants:
    - Every test gets its own data file under tmp_path
    - get_store and get_clock overridden, so routes see the test store and FIXED_NOW
    - Overrides cleared after each test

Design Decisions:
    - Real JsonInternStore over a fake: the file round-trip is part of what routes promise
    - ASGITransport does not run the lifespan, so the store singleton is never touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from intern_tracker.api.dependencies import get_clock
from intern_tracker.infrastructure.json_store import JsonInternStore, get_store
from intern_tracker.main import app
from intern_tracker.services.dashboard_service import DashboardService
from intern_tracker.services.intern_service import InternService
from tests.factories import FIXED_NOW


@pytest.fixture
def store(tmp_path):
    """Empty store."""
    s = JsonInternStore(tmp_path / "interns.json", seed=False)
    s.ensure_initialized()
    return s


@pytest.fixture
def seeded_store(tmp_path):
    """Store holding the five seed records."""
    s = JsonInternStore(tmp_path / "interns.json", seed=True)
    s.ensure_initialized()
    return s


@pytest.fixture
def service(store):
    return InternService(store, clock=lambda: FIXED_NOW)


@pytest.fixture
def seeded_service(seeded_store):
    return InternService(seeded_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def dashboard_service(seeded_store):
    return DashboardService(seeded_store, clock=lambda: FIXED_NOW, interviews_scheduled=2)


async def _client_for(store_instance):
    app.dependency_overrides[get_store] = lambda: store_instance
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(store):
    """FastAPI test client over an empty store."""
    async for c in _client_for(store):
        yield c


@pytest.fixture
async def seeded_client(seeded_store):
    """FastAPI test client over the seed records."""
    async for c in _client_for(seeded_store):
        yield c
