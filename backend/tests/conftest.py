"""
RouteTour — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── test_client:       HTTPX AsyncClient bound to the real application
    ├── make_client:       Factory for clients bound to ad-hoc test apps
    └── auth_headers:      A non-empty Authorization header
"""

import os

# Override settings for testing BEFORE any routetour imports
# Why: The settings singleton is built at import time
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["CORS_ORIGINS"] = "*"
os.environ["PRETTY_QUERY_PARAM"] = "pretty"
os.environ["PRETTY_INDENT"] = "2"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to the FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.
             Redirects are NOT followed, so 302s can be asserted.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from routetour.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_client():
    """
    Provides a factory for clients bound to any ASGI app.

    Why:     Middleware tests build small throwaway apps with routes that
             raise, without adding such routes to the real application.
    """
    def _make(app) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    return _make


@pytest.fixture
def auth_headers():
    """Any non-empty value passes the presence-only auth gate."""
    return {"Authorization": "Bearer jwt-token-123"}
