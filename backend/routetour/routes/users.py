"""
RouteTour — Users API Route Handlers
======================================

What:  Stub CRUD over /api/users plus search and login.
Why:   Shows every way a handler receives input: path segments, query
       parameters and JSON bodies, across the four common HTTP methods.
How:   No storage behind any of these. Bodies are echoed, ids are echoed,
       search always returns no results, login always returns the same token.

Route Table:
    POST   /api/users           → 201 {"message": "User created", "user": <body>}
    PUT    /api/users/{id}      → 200 {"message": "User <id> updated", "user": <body>}
    DELETE /api/users/{id}      → 200 {"message": "User <id> deleted"}
    GET    /api/users/{id}      → 200 {"id": <id>, "name": "John Doe"}
    GET    /api/search          → 200 {"query": q, "page": page, "results": []}
    POST   /api/login           → 200 {"token": "jwt-token-123"}

Body parsing:
    Handlers call `await request.json()` themselves instead of declaring a
    Pydantic body. Any JSON shape is accepted, and malformed JSON raises
    inside the handler, where ErrorHandlingMiddleware turns it into a 500.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request

from routetour.routes import get_with_head
from routetour.schemas.api import (
    ErrorResponse,
    MessageResponse,
    SearchResponse,
    TokenResponse,
    UserDetailResponse,
    UserEchoResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])

DEMO_USER_NAME = "John Doe"
DEMO_TOKEN = "jwt-token-123"


# ── Request Methods ───────────────────────────────────────────────────────

@router.post(
    "/users",
    status_code=201,
    response_model=UserEchoResponse,
    responses={500: {"description": "Malformed JSON body", "model": ErrorResponse}},
    summary="Create a user (echo)",
)
async def create_user(request: Request) -> dict:
    """Echo the JSON body back as the created user."""
    user = await request.json()
    return {"message": "User created", "user": user}


@router.put(
    "/users/{user_id}",
    response_model=UserEchoResponse,
    responses={500: {"description": "Malformed JSON body", "model": ErrorResponse}},
    summary="Update a user (echo)",
)
async def update_user(user_id: str, request: Request) -> dict:
    user = await request.json()
    return {"message": f"User {user_id} updated", "user": user}


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
)
async def delete_user(user_id: str) -> dict:
    return {"message": f"User {user_id} deleted"}


# ── Path Parameters ───────────────────────────────────────────────────────

@get_with_head(
    router,
    "/users/{user_id}",
    response_model=UserDetailResponse,
    summary="Get a user by ID",
    description="Returns a static record; `id` is the path segment, unparsed.",
)
async def get_user(user_id: str) -> dict:
    return {"id": user_id, "name": DEMO_USER_NAME}


# ── Query Parameters ──────────────────────────────────────────────────────

@get_with_head(
    router,
    "/search",
    response_model=SearchResponse,
    summary="Search (echoes parameters)",
)
async def search(
    q: Optional[str] = Query(default=None, description="Search text; defaults to ''"),
    page: Optional[str] = Query(default=None, description="Page number as text; defaults to '1'"),
) -> dict:
    """
    Echo the search parameters with an empty result set.

    Empty values (`?q=&page=`) fall back to the defaults, same as absent ones.
    """
    return {"query": q or "", "page": page or "1", "results": []}


# ── Body Parameters ───────────────────────────────────────────────────────

@router.post(
    "/login",
    response_model=TokenResponse,
    responses={500: {"description": "Malformed JSON body", "model": ErrorResponse}},
    summary="Log in (always succeeds)",
    description=(
        "Reads `username` and `password` from the JSON body but does not verify "
        "them. Every well-formed request receives the same demo token."
    ),
)
async def login(request: Request) -> dict:
    credentials = await request.json()
    username = credentials.get("username") if isinstance(credentials, dict) else None
    logger.debug("Issuing demo token for username=%s", username)
    return {"token": DEMO_TOKEN}
