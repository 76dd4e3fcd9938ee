"""Database engine setup and initialization.

The engine is built without connection pooling: every repository call opens
its own connection and closes it before returning.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from .config import Settings, settings
from .logging_config import get_logger
# Import models to register them with SQLModel
from .models import User  # noqa: F401

logger = get_logger(__name__)


def build_engine(app_settings: Settings) -> Engine:
    """Create a non-pooling engine for the configured database.

    Args:
        app_settings: Application settings

    Returns:
        Engine: SQLAlchemy engine that opens a fresh connection per checkout
    """
    url = app_settings.sqlalchemy_url
    return create_engine(
        url,
        echo=app_settings.debug,  # Log SQL queries in debug mode
        poolclass=NullPool,
        connect_args={
            "check_same_thread": False  # Required for SQLite, ignored for PostgreSQL
        } if url.startswith("sqlite") else {}
    )


engine = build_engine(settings)


def create_db_and_tables(target: Engine = engine) -> None:
    """Create the ``users`` table if it does not exist.

    This function is idempotent - it won't recreate existing tables.
    """
    SQLModel.metadata.create_all(target)


def drop_db_and_tables(target: Engine = engine) -> None:
    """Drop all tables. Only use for testing or development purposes."""
    SQLModel.metadata.drop_all(target)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """FastAPI lifespan context manager for database initialization.

    Creates tables on startup and disposes the engine on shutdown.
    """
    create_db_and_tables()
    logger.info("Database tables ready")
    yield
    engine.dispose()


def test_database_connection(target: Engine = engine) -> bool:
    """Test database connection.

    Returns:
        bool: True if ``SELECT 1`` succeeds, False otherwise
    """
    try:
        with target.connect() as connection:
            connection.execute(text("SELECT 1"))
            return True
    except SQLAlchemyError as e:
        logger.warning(f"Database connectivity check failed: {str(e)}")
        return False

