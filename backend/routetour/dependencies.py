"""
RouteTour — Route-Scoped Dependencies
=======================================

What:  FastAPI dependencies that guard individual routes.
How:   Declared per route with `dependencies=[Depends(...)]`; FastAPI runs
       them before the handler. Raising short-circuits the handler, returning
       lets it run.

Auth gate:
    Checks only that an Authorization header is present and non-empty.
    The token is NOT decoded or verified; this is a demonstration of
    route-scoped middleware, not an authentication scheme.
"""

import logging
from typing import Optional

from fastapi import Header

from routetour.exceptions import UnauthorizedError
from routetour.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


async def require_authorization(
    authorization: Optional[str] = Header(default=None),
) -> str:
    """
    Reject the request with 401 unless an Authorization header is sent.

    Returns the raw header value so a handler may depend on it directly.
    """
    if not authorization:
        logger.info("[%s] Rejected request without Authorization header", request_id_var.get(""))
        raise UnauthorizedError()
    return authorization
