"""
RouteTour — Protected Route Handler
=====================================

What:  GET /api/protected, guarded by a route-scoped auth gate.
How:   `require_authorization` runs before the handler. Without an
       Authorization header it raises UnauthorizedError (→ 401) and the
       handler never executes.
"""

from fastapi import APIRouter, Depends

from routetour.dependencies import require_authorization
from routetour.routes import get_with_head
from routetour.schemas.api import ErrorResponse, MessageResponse

router = APIRouter(prefix="/api", tags=["Auth"])


@get_with_head(
    router,
    "/protected",
    response_model=MessageResponse,
    dependencies=[Depends(require_authorization)],
    responses={401: {"description": "Missing Authorization header", "model": ErrorResponse}},
    summary="Route behind the auth gate",
)
async def protected() -> dict:
    return {"message": "Protected route accessed"}
