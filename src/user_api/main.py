"""FastAPI application entry point.

This module initializes the FastAPI application with routers, middleware,
database lifecycle management, logging and global exception handlers.
"""

import logging

from fastapi import FastAPI

from . import __version__
from .config import settings
from .database import lifespan
from .error_handlers import register_exception_handlers
from .logging_config import LoggingMiddleware, setup_logging
from .middleware import SecurityHeadersMiddleware
from .routers import health_router, users_router

logger = logging.getLogger(__name__)

# Initialize logging before creating the app
setup_logging(settings)
logger.info("Starting FastAPI application initialization")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="User Management API",
        description="Create users and fetch them by identifier",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,  # Disable docs in production
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    configure_middleware(app)
    register_exception_handlers(app)
    configure_routers(app)

    logger.info("FastAPI application configuration completed")
    return app


def configure_middleware(app: FastAPI) -> None:
    """Configure middleware stack for the application.

    The last middleware added runs first, so request logging wraps
    everything else.
    """
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)


def configure_routers(app: FastAPI) -> None:
    """Configure and register API routers."""
    app.include_router(health_router)
    app.include_router(users_router)


# Create the FastAPI application instance
app = create_app()

logger.info(
    "FastAPI application initialized successfully",
    extra={
        "environment": settings.environment,
        "debug": settings.debug,
        "database_url": settings.sqlalchemy_url.split("@")[-1],
    },
)
