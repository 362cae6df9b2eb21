"""
Noteboard Backend: Request Logging Middleware
==============================================

What:  One access log line per HTTP request.
How:   Measures the time spent downstream and logs method, path, status,
       duration and request id. Severity follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Request and response bodies are never logged; notes are personal content.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteboard.middleware.request_id import request_id_var

logger = logging.getLogger("noteboard.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs a structured summary of each request and its response."""

    # Probe endpoints polled by orchestrators; logging them drowns real traffic
    SKIP_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
