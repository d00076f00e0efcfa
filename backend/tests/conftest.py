"""
Service Skeleton Backend — Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── data_dir:         tmp_path / "var", NOT created (fresh-checkout state)
    ├── fixed_clock:      Clock pinned to 2024-01-15 12:30:45
    ├── static_identity:  Identity provider reporting "deploy"
    ├── runner:           ApplicationRunner wired to the three above
    └── test_client:      HTTPX AsyncClient for API endpoint testing
"""

import os
import tempfile
from datetime import datetime

# Override settings for testing BEFORE any app imports
# Why: Keeps tests away from the developer's .env.local and real var/ directory
os.environ["APP_ENV"] = "test"
os.environ["VAR_DIR"] = tempfile.mkdtemp(prefix="skeleton_test_var_")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = ""
os.environ["CACHE_HOST"] = ""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.services.bootstrap import ApplicationRunner, FixedClock, StaticIdentity


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "var"


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 1, 15, 12, 30, 45))


@pytest.fixture
def static_identity():
    return StaticIdentity("deploy")


@pytest.fixture
def runner(data_dir, fixed_clock, static_identity):
    return ApplicationRunner(data_dir, clock=fixed_clock, identity=static_identity)


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app. Lifespan does
    not run, so tests set up the data directory themselves.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
