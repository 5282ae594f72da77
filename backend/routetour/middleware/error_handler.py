"""
RouteTour — Error Handling Middleware
=======================================

What:  Wraps all downstream execution and converts escaped exceptions to 500s.
How:   try/except around call_next; the exception's message becomes the
       response body: {"error": "<message>"}.
When:  Innermost middleware, directly around the router.

What reaches this middleware:
    - Malformed or missing JSON bodies (json.JSONDecodeError from request.json())
    - Any other exception raised inside a handler
    What does NOT: framework HTTP errors (404) and RouteTourError subclasses,
    which are answered earlier by the exception handlers in main.py.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from routetour.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


def error_message(exc: BaseException) -> str:
    """Message reported to the client; falls back when the exception has none."""
    return str(exc) or DEFAULT_ERROR_MESSAGE


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Converts any exception raised by a route into a 500 JSON response.

    The full traceback is logged server-side with the request ID.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                exc,
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"error": error_message(exc)})
