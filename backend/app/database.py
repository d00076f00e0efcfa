"""
Service Skeleton Backend — Database Session Management
========================================================

What:  Optional async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Gives services built on the skeleton a ready-made persistence seam.
How:   The engine is created lazily from DATABASE_URL on first use. With no
       DATABASE_URL the skeleton runs without a database: get_engine()
       returns None and the health check reports "not_configured".
Who:   Health check today; route handlers of real services via Depends().

Connection Pooling:
    pool_size / max_overflow come from settings; pool_pre_ping catches stale
    connections after a database restart; pool_recycle=3600 caps connection age.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


class Base(DeclarativeBase):
    """Base class for ORM models added by services built on the skeleton."""

    pass


def get_engine() -> Optional[AsyncEngine]:
    """Returns the shared engine, creating it on first call; None without DATABASE_URL."""
    global _engine, _session_factory
    if settings.database_url is None:
        return None
    if _engine is None:
        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
            # SQL logging is noisy; only useful during development
            echo=settings.log_level == "DEBUG",
        )
        # expire_on_commit=False: attributes stay readable after commit
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _engine


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db_session)):
            result = await db.execute(select(Item))
            return result.scalars().all()

    Raises:
        RuntimeError: DATABASE_URL is not configured.
    """
    if get_engine() is None or _session_factory is None:
        raise RuntimeError("DATABASE_URL is not configured")
    async with _session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
