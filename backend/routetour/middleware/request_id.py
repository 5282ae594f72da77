"""
RouteTour — Request ID Middleware
===================================

What:  Assigns a short correlation ID to each incoming request and echoes it back.
Why:   Every log line written while serving a request can be tied to that request.
How:   Reuses the client's X-Request-ID or generates one, stores it in a
       ContextVar and request.state, returns it in the response header.
When:  Outermost middleware (runs before all other processing).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local storage for the current request ID.
# Concurrent requests share a thread, so threading.local would not isolate them.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present and non-empty
        2. Otherwise generate an 8-character ID from a UUID4
        3. Store in ContextVar (loggers) and request.state (handlers)
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
