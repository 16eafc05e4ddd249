"""Shared pytest fixtures for the maps-requests test suite."""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from api.main import app
from directions.request import DirectionsRequest
from models.location import Address
from providers.factory import get_provider
from providers.mock.maps_provider import MockMapsProvider


@pytest.fixture
def new_york_to_boston() -> DirectionsRequest:
    return DirectionsRequest(Address("New York"), Address("Boston"))


@pytest.fixture
def mock_provider() -> MockMapsProvider:
    return MockMapsProvider()


# ── API test client ────────────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def api_client(mock_provider):
    """AsyncClient wired to FastAPI with the mock provider injected."""
    app.dependency_overrides[get_provider] = lambda: mock_provider
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
    app.dependency_overrides.clear()
