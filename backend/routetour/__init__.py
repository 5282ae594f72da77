"""
RouteTour — Application Package Initializer
=============================================

What: Marks the `routetour` directory as a Python package.
Why:  Enables module imports like `from routetour.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    RouteTour is a guided tour of web framework features. There is no
    business layer and no persistence; every route is a static handler.

    ┌─────────────────────────────────────┐
    │      Middleware (Cross-cutting)     │  ← request ID, logging, pretty JSON,
    │                                     │    CORS, error wrapper
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← one module per feature group
    ├─────────────────────────────────────┤
    │   Schemas & Dependencies (Contract) │  ← Pydantic models, auth gate
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
