"""
Service Skeleton Backend — Health Check Route
===============================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Checks the working-data directory and, when configured, the database
       and the cache. Unconfigured integrations are reported, not contacted.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Everything configured is operational (HTTP 200)
    - degraded:  Database or cache unreachable (HTTP 200, flag for monitoring)
    - unhealthy: Data directory missing or not writable (HTTP 503)
"""

import asyncio
import logging
import os
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app import __version__
from app.config import settings
from app.database import get_engine
from app.schemas.bootstrap import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()

CACHE_CONNECT_TIMEOUT = 2.0


def check_data_dir() -> str:
    var_dir = settings.var_dir
    if not var_dir.is_dir():
        return "missing"
    if not os.access(var_dir, os.W_OK | os.X_OK):
        return "not_writable"
    return "writable"


async def check_database() -> str:
    engine = get_engine()
    if engine is None:
        return "not_configured"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        return "disconnected"
    return "connected"


async def check_cache() -> str:
    if not settings.cache_configured:
        return "not_configured"
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(settings.cache_host, settings.cache_port),
            timeout=CACHE_CONNECT_TIMEOUT,
        )
    except (OSError, asyncio.TimeoutError) as e:
        logger.warning(
            "Health check: cache %s:%d unreachable: %s",
            settings.cache_host, settings.cache_port, str(e),
        )
        return "unreachable"
    writer.close()
    await writer.wait_closed()
    return "reachable"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Data directory unusable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    data_dir_status = check_data_dir()
    db_status = await check_database()
    cache_status = await check_cache()

    overall = "healthy"
    if db_status == "disconnected" or cache_status == "unreachable":
        overall = "degraded"
    if data_dir_status != "writable":
        overall = "unhealthy"

    body = HealthResponse(
        status=overall,
        version=__version__,
        environment=settings.app_env,
        data_dir=data_dir_status,
        database=db_status,
        cache=cache_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall == "unhealthy":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
