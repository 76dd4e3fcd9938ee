"""API route handlers.

This module exports all API routers for the FastAPI application.
"""

from .health import router as health_router
from .users import router as users_router

__all__ = ["health_router", "users_router"]
