"""
RouteTour — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn routetour.main:app, or python -m routetour).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌───────────────────────────────────────────────────────────┐
    │                      FastAPI App                          │
    │                                                           │
    │  Middleware Chain:                                        │
    │  Req ID → Logging → Pretty JSON → CORS → Error Handler    │
    │  (CORS = wildcard-origin filler + CORSMiddleware)         │
    │                                                           │
    │  Routes (registration order):                             │
    │  /  →  /api/users…  →  /text…  →  /api/protected  →  /api/v1…
    │                                                           │
    │  Exception Handlers:                                      │
    │  ┌─────────────────────────────────────────────────────┐  │
    │  │ Unauthorized→401 │ no route→404 │ anything else→500 │  │
    │  └─────────────────────────────────────────────────────┘  │
    └───────────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routetour import __version__
from routetour.config import settings
from routetour.exceptions import RouteTourError
from routetour.middleware.cors import WildcardOriginMiddleware
from routetour.middleware.error_handler import ErrorHandlingMiddleware
from routetour.middleware.logging import RequestLoggingMiddleware
from routetour.middleware.pretty_json import PrettyJSONMiddleware
from routetour.middleware.request_id import RequestIDMiddleware, request_id_var
from routetour.routes import protected, responses, root, users, v1

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Root logger with one stdout handler and a consistent format.
    When:    Called once during app startup (before ANY other initialization).

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # routetour.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and print the banner.
    Shutdown: log it. There are no resources to release.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    if settings.docs_enabled:
        logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RouteTourError (and subclasses) → exc.status_code, {"error": exc.message}
        HTTPException 404 / 405         → 404 {"error": "Not Found"}
        HTTPException (other)           → exc.status_code, {"error": exc.detail}

    Everything else falls through to ErrorHandlingMiddleware (500).
    """

    @app.exception_handler(RouteTourError)
    async def handle_app_error(request: Request, exc: RouteTourError):
        """Application error with a known status code."""
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Framework-raised HTTP errors, chiefly "no route matched".

        A path registered only for other methods is reported as 404 too:
        there is no separate 405 response.
        """
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "A guided tour of routing, middleware and response patterns: path and "
            "query parameters, JSON bodies, text/HTML/redirect/download responses, "
            "an auth gate, error handling, route groups and 404 handling."
        ),
        version=__version__,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost).
    # Added: Error Handler → CORS → Wildcard Origin → Pretty JSON → Logging → Request ID
    # Runs:  Request ID → Logging → Pretty JSON → Wildcard Origin → CORS → Error Handler → route

    # Error handler: innermost, turns any escaped exception into a 500
    app.add_middleware(ErrorHandlingMiddleware)

    # CORS: handles preflight OPTIONS requests and adds CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "HEAD", "PUT", "POST", "DELETE", "PATCH"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Custom-Header", "Content-Disposition"],
    )

    # Wildcard origin: "*" also on responses to requests without an Origin header
    app.add_middleware(WildcardOriginMiddleware, allow_origins=settings.cors_origins_list)

    # Pretty JSON: ?pretty re-indents JSON bodies
    app.add_middleware(PrettyJSONMiddleware)

    # Request logging: logs method, path, status, duration
    app.add_middleware(RequestLoggingMiddleware)

    # Request ID: outermost, so every log line above can be correlated
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Order is significant: routes are matched in registration order.
    app.include_router(root.router)
    app.include_router(users.router)
    app.include_router(responses.router)
    app.include_router(protected.router)
    app.include_router(v1.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `routetour.main:app` to be importable
app = create_app()
