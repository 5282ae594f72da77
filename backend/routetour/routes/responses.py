"""
RouteTour — Response Type Route Handlers
==========================================

What:  One route per response flavour the framework can produce.

Route Table:
    GET /text      → 200 text/plain, X-Custom-Header: value
    GET /json      → 200 application/json
    GET /html      → 200 text/html
    GET /redirect  → 302 Location: /
    GET /download  → 200 text/plain with Content-Disposition: attachment
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from routetour.routes import get_with_head
from routetour.schemas.api import SampleJSONResponse

router = APIRouter(tags=["Responses"])


@get_with_head(router, "/text", response_class=PlainTextResponse, summary="Text with a custom header")
async def text_response() -> PlainTextResponse:
    return PlainTextResponse(
        "This is a text response",
        status_code=200,
        headers={"X-Custom-Header": "value"},
    )


@get_with_head(router, "/json", response_model=SampleJSONResponse, summary="Static JSON payload")
async def json_response() -> dict:
    return {"message": "Hello", "data": {"key": "value"}}


@get_with_head(router, "/html", response_class=HTMLResponse, summary="HTML fragment")
async def html_response() -> HTMLResponse:
    return HTMLResponse("<h1>Hello Hono!</h1><p>Welcome to Hono framework</p>")


@get_with_head(
    router,
    "/redirect",
    response_class=RedirectResponse,
    status_code=302,
    summary="Redirect to /",
)
async def redirect() -> RedirectResponse:
    # Starlette defaults to 307; a plain redirect here is a 302 Found.
    return RedirectResponse(url="/", status_code=302)


@get_with_head(router, "/download", response_class=PlainTextResponse, summary="File download")
async def download() -> PlainTextResponse:
    """
    Serve a text body as an attachment.

    Content-Type is passed explicitly so no charset parameter is appended.
    """
    return PlainTextResponse(
        "File content",
        status_code=200,
        headers={
            "Content-Type": "text/plain",
            "Content-Disposition": "attachment; filename=file.txt",
        },
    )
