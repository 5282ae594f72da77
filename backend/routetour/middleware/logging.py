"""
RouteTour — Request Logging Middleware
========================================

What:  Access logging for every HTTP request and response.
How:   Logs an arrival line, then a completion line with status and duration.
When:  Right after RequestIDMiddleware (uses the request ID for correlation).

Log Format:
    <-- GET /api/users/42 [a1b2c3d4]
    --> GET /api/users/42 200 1.2ms [a1b2c3d4]

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, request ID, client IP
    ❌ Don't log: request bodies (login credentials), Authorization header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from routetour.middleware.request_id import request_id_var

logger = logging.getLogger("routetour.access")


def status_log_level(status: int) -> int:
    """
    Map an HTTP status code to a logging level.

    5xx → ERROR, 4xx → WARNING, everything else → INFO.
    """
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and latency of each request.

    The response is returned untouched; this middleware only observes.
    Duration is measured from middleware entry to response return, so it
    includes every middleware further down the chain.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # perf_counter: monotonic, higher resolution than time.time()
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        logger.info("<-- %s %s [%s]", method, path, rid)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code

        logger.log(
            status_log_level(status),
            "--> %s %s %d %.1fms [%s]",
            method,
            path,
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
