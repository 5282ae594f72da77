"""
RouteTour — Versioned API Route Group
=======================================

What:  Route groups: every route here lives under the /api/v1 base path,
       and a nested group adds /admin on top of it.
How:   APIRouter prefixes compose by concatenation when one router
       includes another: "/api/v1" + "/admin" + "/dashboard".

Route Table:
    GET /api/v1/users            → {"version": "v1", "users": []}
    GET /api/v1/posts            → {"version": "v1", "posts": []}
    GET /api/v1/admin/dashboard  → {"admin": true, "dashboard": "Welcome Admin"}
"""

from fastapi import APIRouter

from routetour.routes import get_with_head
from routetour.schemas.api import (
    DashboardResponse,
    VersionedPostsResponse,
    VersionedUsersResponse,
)

API_VERSION = "v1"

router = APIRouter(prefix=f"/api/{API_VERSION}", tags=["API v1"])

# Nested group; mounted into `router` at the bottom of this module
admin_router = APIRouter(prefix="/admin", tags=["Admin"])


@get_with_head(router, "/users", response_model=VersionedUsersResponse, summary="List users (stub)")
async def list_users() -> dict:
    return {"version": API_VERSION, "users": []}


@get_with_head(router, "/posts", response_model=VersionedPostsResponse, summary="List posts (stub)")
async def list_posts() -> dict:
    return {"version": API_VERSION, "posts": []}


@get_with_head(admin_router, "/dashboard", response_model=DashboardResponse, summary="Admin dashboard")
async def dashboard() -> dict:
    return {"admin": True, "dashboard": "Welcome Admin"}


# include_router copies routes at call time, so this must follow every
# admin_router registration above.
router.include_router(admin_router)
