"""
Service Skeleton Backend — Database Seam Tests
================================================

What:  The skeleton runs without a database until DATABASE_URL is set.
"""

import pytest

from app import database
from app.config import settings


def test_no_engine_without_database_url():
    assert settings.database_url is None
    assert database.get_engine() is None


@pytest.mark.asyncio
async def test_session_dependency_requires_database_url():
    sessions = database.get_db_session()
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        await sessions.__anext__()


@pytest.mark.asyncio
async def test_dispose_without_engine_is_noop():
    await database.dispose_engine()
    assert database.get_engine() is None
