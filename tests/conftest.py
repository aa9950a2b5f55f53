"""Shared test fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app
from tests.fakes import EMP_ROW_1, FakeCacheStore, FakeSourceStore


@pytest.fixture
def source() -> FakeSourceStore:
    return FakeSourceStore({("emp", 1): EMP_ROW_1, ("emp", 2): {**EMP_ROW_1, "empno": 2}})


@pytest.fixture
def cache() -> FakeCacheStore:
    return FakeCacheStore()


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints (lifespan not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
