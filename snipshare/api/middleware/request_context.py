"""
Request Context Middleware

Binds a request id to the structlog context for the lifetime of each
request and writes one access log line when the response is ready.

Behavior:
    1. Reuse the client's X-Request-ID header, or generate a short id
    2. Bind request_id/method/path so every log line of the request has them
    3. Log status and duration (5xx → error, 4xx → warning, else info)
    4. Echo the id back in the X-Request-ID response header

Usage:
======
    from snipshare.api.middleware.request_context import RequestContextMiddleware

    app.add_middleware(RequestContextMiddleware)
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snipshare.shared.core.logging import clear_log_context, get_logger, log_context

REQUEST_ID_HEADER = "X-Request-ID"

# Probes hit these constantly
QUIET_PATHS = frozenset({"/health", "/live"})

access_logger = get_logger("snipshare.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request id propagation and access logging."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        response.headers[REQUEST_ID_HEADER] = request_id

        if request.url.path not in QUIET_PATHS:
            status = response.status_code
            if status >= 500:
                log = access_logger.error
            elif status >= 400:
                log = access_logger.warning
            else:
                log = access_logger.info
            log("Request completed", status=status, duration_ms=duration_ms)

        clear_log_context()
        return response
