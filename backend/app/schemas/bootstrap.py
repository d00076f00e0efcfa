"""
Service Skeleton Backend — Pydantic Response Schemas
======================================================

What:  Pydantic models defining what the skeleton's endpoints return.
Why:   Automatic serialization and OpenAPI doc generation.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class RunResponse(BaseModel):
    """
    What:  Result of one bootstrap run triggered over HTTP.
    Who:   Returned by GET /.
    """
    status: str = Field(description="Bootstrap outcome: ok")
    logged_at: datetime = Field(description="Timestamp written into the log line (local time)")
    user: str = Field(description="OS user the service process runs as")
    log_file: str = Field(description="Log file name inside the data directory")


class ErrorResponse(BaseModel):
    """
    What:  Standard error response format for all error types.
    Who:   Returned by global exception handlers.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: str = Field(default="", description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for Docker health checks and load balancers.
    """
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="APP_ENV the service was started with")
    data_dir: str = Field(description="Working-data directory: writable, missing, not_writable")
    database: str = Field(description="Database: not_configured, connected, disconnected")
    cache: str = Field(description="Cache: not_configured, reachable, unreachable")
    uptime_seconds: float = Field(description="Seconds since service started")
