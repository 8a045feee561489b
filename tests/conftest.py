from contextlib import asynccontextmanager

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from src.fleet_api.analytics.dependencies import get_analytics_service
from src.fleet_api.main import app
from tests.mocks.config_mocks import mock_get_settings  # noqa: F401
from tests.mocks.roster_mocks import (  # noqa: F401
    analysis_config,
    analytics_service,
    enriched_records,
    raw_records,
)

# -----------------------------------------------------------------------------
# FASTAPI CLIENT FOR API TESTING
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_openapi_schema():
    app.openapi_schema = None
    yield
    app.openapi_schema = None


@pytest.fixture(autouse=True)
def reset_dependency_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def override_analytics_service(analytics_service):  # noqa: F811
    app.dependency_overrides[get_analytics_service] = lambda: analytics_service
    return analytics_service


@pytest.fixture(scope="function")
async def async_client():
    """
    Provide an async client for FastAPI test with lifespan events.
    """

    @asynccontextmanager
    async def test_lifespan(_):
        yield

    app.router.lifespan_context = test_lifespan
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
