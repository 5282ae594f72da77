"""
RouteTour — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions that map onto HTTP error responses.
How:   Each exception class carries a message and optional context dict.
       Exception handlers registered in main.py turn them into
       `{"error": ...}` JSON bodies with the right status code.
Who:   Raised by dependencies (the auth gate); caught by global handlers.

Exception Hierarchy:
    RouteTourError (base)
    └── UnauthorizedError        → 401 Unauthorized

Anything that is not a RouteTourError and escapes a handler is caught by
ErrorHandlingMiddleware and reported as a 500.
"""

from typing import Any, Dict, Optional


class RouteTourError(Exception):
    """
    Base exception for all RouteTour application errors.

    Attributes:
        message:     User-facing error description (returned as "error")
        status_code: HTTP status the global handler responds with
        context:     Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(RouteTourError):
    """
    Raised when a protected route is called without credentials.

    What:    The `Authorization` header is missing or empty.
    When:    Any route guarded by `require_authorization`.
    HTTP:    401 Unauthorized

    Only presence is checked; the header value is never inspected.
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Unauthorized",
        header: str = "Authorization",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["header"] = header
        super().__init__(message=message, context=ctx)
        self.header = header
