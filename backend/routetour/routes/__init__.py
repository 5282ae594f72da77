# Routes package init
"""
RouteTour — API Routes Package
================================

What:  HTTP route handlers, one module per feature group.

Route Inventory (registration order):
    - root.py:       GET  /
    - users.py:      POST /api/users, PUT|DELETE|GET /api/users/{id},
                     GET  /api/search, POST /api/login
    - responses.py:  GET  /text, /json, /html, /redirect, /download
    - protected.py:  GET  /api/protected            (auth gate)
    - v1.py:         GET  /api/v1/users, /api/v1/posts,
                     GET  /api/v1/admin/dashboard  (nested group)

Matching:
    Routes are tried in registration order and the first one whose path
    AND method match wins. A path match under the wrong method keeps
    searching, so POST /api/users and GET /api/users/{id} never collide.

    Every GET route also answers HEAD (see `get_with_head`).
"""

from typing import Any, Callable

from fastapi import APIRouter


def get_with_head(router: APIRouter, path: str, **kwargs: Any) -> Callable:
    """
    Register a handler for GET and HEAD on the same path.

    FastAPI's APIRoute does not answer HEAD for GET routes on its own. The
    HEAD twin is hidden from the OpenAPI schema so each operation ID stays
    unique; servers drop the body of a HEAD response.
    """
    def decorator(func: Callable) -> Callable:
        router.get(path, **kwargs)(func)
        router.head(path, include_in_schema=False, **kwargs)(func)
        return func
    return decorator
