# Middleware package init
"""
RouteTour — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Pretty JSON] → [CORS] → [Error Handler] → Route

    1. Request ID FIRST: every later log line can carry the correlation ID
    2. Logging: sees the final status, including 500s from the error handler
    3. Pretty JSON: re-indents whatever JSON body comes back, errors included
    4. CORS: WildcardOriginMiddleware ("*" for Origin-less requests) around
       Starlette's CORSMiddleware (preflight, requests with Origin)
    5. Error Handler LAST: closest to the route, so nothing escapes it

    Each middleware calls `call_next` to continue; returning a response
    without calling it short-circuits the chain.
"""
