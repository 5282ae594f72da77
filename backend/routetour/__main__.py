"""
RouteTour — Server Launcher
=============================

Usage:
    python -m routetour

Binds uvicorn to BACKEND_HOST:BACKEND_PORT. Logging is configured by the
application lifespan, so uvicorn's own log config is left at its defaults
apart from the level.
"""

import uvicorn

from routetour.config import settings


def main() -> None:
    uvicorn.run(
        "routetour.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
