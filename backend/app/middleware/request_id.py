"""
Service Skeleton Backend — Request ID Middleware
==================================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
How:   Reuses the client's X-Request-ID when present, otherwise generates a
       short UUID. The ID lives in a ContextVar so loggers and exception
       handlers can pick it up without threading it through call signatures.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    # 8 hex chars are enough to correlate log lines and stay readable
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Stores the request ID in request_id_var and request.state, echoes it back."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
