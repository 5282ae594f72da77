"""
RouteTour — Pydantic Response Schemas
=======================================

What:  Pydantic models describing the fixed-shape JSON bodies the routes return.
Why:   FastAPI serializes handler return values through them and publishes
       them in the OpenAPI document (/docs).
Note:  Request bodies are deliberately NOT modelled. The tour routes accept
       any JSON and echo it back; a request model would add validation
       (422 responses) that the routes do not perform.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Users API (/api)
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. DELETE /api/users/{id}."""
    message: str = Field(description="Human-readable outcome")


class UserEchoResponse(BaseModel):
    """
    What:  Acknowledgement plus the request body, echoed unchanged.
    Who:   POST /api/users (201) and PUT /api/users/{id} (200).
    """
    message: str = Field(description="Human-readable outcome")
    user: Any = Field(description="The JSON body exactly as received")


class UserDetailResponse(BaseModel):
    """Static user record; the id is whatever path segment was requested."""
    id: str = Field(description="Path segment from /api/users/{id}, verbatim")
    name: str = Field(description="Always 'John Doe'")


class SearchResponse(BaseModel):
    """
    What:  Echo of the search parameters with an empty result list.
    Who:   GET /api/search.
    Why strings: query parameters are echoed verbatim, never coerced.
    """
    query: str = Field(description="Value of ?q, or empty string")
    page: str = Field(description="Value of ?page, or '1'")
    results: List[Any] = Field(description="Always empty")


class TokenResponse(BaseModel):
    """Hard-coded token returned by POST /api/login."""
    token: str = Field(description="Static demo token; carries no claims")


# ══════════════════════════════════════════════════════════════════════════
# Response Type Showcase
# ══════════════════════════════════════════════════════════════════════════


class SampleJSONResponse(BaseModel):
    """Static payload returned by GET /json."""
    message: str
    data: Dict[str, str]


# ══════════════════════════════════════════════════════════════════════════
# Versioned API (/api/v1)
# ══════════════════════════════════════════════════════════════════════════


class VersionedUsersResponse(BaseModel):
    version: str = Field(description="API version of the group, 'v1'")
    users: List[Any] = Field(description="Always empty")


class VersionedPostsResponse(BaseModel):
    version: str = Field(description="API version of the group, 'v1'")
    posts: List[Any] = Field(description="Always empty")


class DashboardResponse(BaseModel):
    admin: bool
    dashboard: str


# ══════════════════════════════════════════════════════════════════════════
# Error Response Model
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by 401, 404 and 500 responses.

    Example:
        {"error": "Not Found"}
    """
    error: str = Field(description="Error message")
