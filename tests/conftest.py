"""Test configuration and fixtures.

This module provides test configuration, database setup and test data
factories for the user API tests.
"""

import os
import tempfile
from datetime import datetime, timezone
from typing import Generator

# Settings are read at import time, so the environment is fixed before
# anything from user_api is imported.
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.gettempdir(), "user_api_test.db")
os.environ["ENVIRONMENT"] = "testing"
os.environ.pop("SUPPRESS_ERROR_DETAILS", None)
os.environ.pop("ALLOWED_ORIGINS", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from user_api.config import Settings
from user_api.database import build_engine, create_db_and_tables, drop_db_and_tables
from user_api.dependencies import get_user_repository
from user_api.main import app
from user_api.models.user import User
from user_api.repositories.user_repository import UserRepository
from user_api.schemas.user_schemas import CreateUserRequest


@pytest.fixture(scope="function")
def test_settings(tmp_path) -> Settings:
    """Create test settings pointing at a per-test SQLite file."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'users.db'}",
        environment="testing",
        log_level="DEBUG",
    )


@pytest.fixture(scope="function")
def production_settings() -> Settings:
    """Settings with production redaction enabled."""
    return Settings(environment="production")


@pytest.fixture(scope="function")
def development_settings() -> Settings:
    """Settings with no redaction at all."""
    return Settings(environment="development", suppress_error_details=False)


@pytest.fixture(scope="function")
def test_engine(test_settings: Settings) -> Generator[Engine, None, None]:
    """Create test database engine with the users table."""
    engine = build_engine(test_settings)
    create_db_and_tables(engine)

    yield engine

    drop_db_and_tables(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def broken_engine(tmp_path) -> Generator[Engine, None, None]:
    """Engine whose database file can never be opened."""
    engine = build_engine(
        Settings(database_url=f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def user_repository(test_engine: Engine) -> UserRepository:
    """Create UserRepository instance for testing."""
    return UserRepository(test_engine)


@pytest.fixture(scope="function")
def client(test_engine: Engine) -> Generator[TestClient, None, None]:
    """Create test client whose repository uses the test database."""
    app.dependency_overrides[get_user_repository] = lambda: UserRepository(test_engine)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def sample_user() -> User:
    """Create a fully formed user that is not stored yet."""
    created = datetime(2024, 1, 1, 12, 30, 0, tzinfo=timezone.utc)
    return User(id="u1", name="Alice", created_at=created, updated_at=created)


@pytest.fixture(scope="function")
def stored_user(test_engine: Engine) -> User:
    """Create a test user in the database."""
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    user = User(id="test", name="Test User", created_at=created, updated_at=created)
    with Session(test_engine) as session:
        session.add(user)
        session.commit()
        session.refresh(user)
    return user


class TestDataFactory:
    """Factory class for creating test data."""

    @staticmethod
    def create_user_request(user_id: str = "test_user", name: str = "Test User") -> CreateUserRequest:
        """Create request data with customizable fields."""
        return CreateUserRequest(id=user_id, name=name)

    @staticmethod
    def create_user(user_id: str = "test_user", name: str = "Test User") -> User:
        """Create an unsaved user stamped with the current time."""
        now = datetime.now(timezone.utc)
        return User(id=user_id, name=name, created_at=now, updated_at=now)


@pytest.fixture(scope="function")
def test_data_factory() -> TestDataFactory:
    """Provide test data factory."""
    return TestDataFactory()
