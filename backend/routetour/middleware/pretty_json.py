"""
RouteTour — Pretty JSON Middleware
====================================

What:  Re-indents JSON response bodies when the client asks for it.
How:   After the downstream chain has produced a response, checks for the
       configured query flag (`?pretty`, with or without a value) and a JSON
       content type, then re-serializes the body with an indent.
When:  Between logging and CORS; sees the final handler/error body.

Example:
    GET /json         → {"message":"Hello","data":{"key":"value"}}
    GET /json?pretty  → {
                          "message": "Hello",
                          "data": {
                            "key": "value"
                          }
                        }
"""

import json
import logging

from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from routetour.config import settings

logger = logging.getLogger(__name__)


class PrettyJSONMiddleware(BaseHTTPMiddleware):
    """
    Rewrites `application/json` bodies with indentation on request.

    Non-JSON responses, and requests without the query flag, are returned
    exactly as produced downstream.
    """

    def __init__(
        self,
        app: ASGIApp,
        query_param: str | None = None,
        indent: int | None = None,
    ):
        super().__init__(app)
        self.query_param = query_param if query_param is not None else settings.pretty_query_param
        self.indent = indent if indent is not None else settings.pretty_indent

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Query params keep blank values, so "?pretty" is present as "".
        wants_pretty = self.query_param in request.query_params

        response = await call_next(request)

        content_type = response.headers.get("content-type", "")
        if not wants_pretty or not content_type.startswith("application/json"):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        headers = MutableHeaders(raw=list(response.raw_headers))

        try:
            payload = json.loads(body)
        except ValueError:
            # Empty (HEAD) or non-JSON body: resend as-is, Content-Length included
            logger.debug("Response body is not valid JSON; returning it unchanged")
            content = body
        else:
            content = json.dumps(payload, indent=self.indent, ensure_ascii=False).encode("utf-8")
            del headers["content-length"]

        return Response(
            content=content,
            status_code=response.status_code,
            headers=headers,
            background=response.background,
        )
