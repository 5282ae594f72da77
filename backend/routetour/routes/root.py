"""
RouteTour — Root Route
========================

What:  GET / — the smallest possible route: a fixed plain-text greeting.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from routetour.routes import get_with_head

router = APIRouter(tags=["Basics"])


@get_with_head(
    router,
    "/",
    response_class=PlainTextResponse,
    summary="Plain-text greeting",
)
async def index() -> PlainTextResponse:
    return PlainTextResponse("Hello Hono!")
