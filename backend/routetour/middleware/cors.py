"""
RouteTour — Wildcard CORS Header Middleware
=============================================

What:  Puts `Access-Control-Allow-Origin: *` on every response when all
       origins are allowed, including requests that carry no Origin header.
How:   Starlette's CORSMiddleware still handles preflight and requests with
       an Origin header; it leaves Origin-less requests alone, and this
       middleware fills in the header for those.
When:  Directly outside CORSMiddleware.
"""

from typing import List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from routetour.config import settings

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"


class WildcardOriginMiddleware(BaseHTTPMiddleware):
    """
    Adds the wildcard allow-origin header to Origin-less requests.

    Does nothing unless "*" is among the allowed origins.
    """

    def __init__(self, app: ASGIApp, allow_origins: Optional[List[str]] = None):
        super().__init__(app)
        origins = allow_origins if allow_origins is not None else settings.cors_origins_list
        self.allow_all = "*" in origins

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        if self.allow_all and "origin" not in request.headers:
            response.headers.setdefault(ALLOW_ORIGIN_HEADER, "*")
        return response
