"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from bookstore.main import create_app
from bookstore.storage import InMemoryBookStore


@pytest.fixture
def store() -> InMemoryBookStore:
    """Fresh store seeded with the three default books."""
    return InMemoryBookStore()


@pytest.fixture
def app(store: InMemoryBookStore):
    """Application bound to the per-test store."""
    return create_app(store)


@pytest.fixture
def client(app) -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
async def async_client(app):
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
