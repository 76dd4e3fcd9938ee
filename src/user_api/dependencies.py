"""FastAPI dependencies for database access and services.

This module provides dependency injection functions for FastAPI endpoints.
Tests override ``get_user_repository`` to point the API at another engine.
"""

from typing import Annotated

from fastapi import Depends

from .config import Settings, get_settings
from .database import engine
from .repositories.user_repository import UserRepository
from .responses import ApiResponse
from .services.user_service import UserService


def get_app_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings: Application configuration
    """
    return get_settings()


def get_user_repository() -> UserRepository:
    """Get a user repository bound to the application engine."""
    return UserRepository(engine)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    """Get user service instance.

    Args:
        repository: User repository

    Returns:
        UserService: User service instance
    """
    return UserService(repository)


def get_api_response() -> ApiResponse:
    """Get the response constructors bound to the global settings."""
    return ApiResponse()


# Type aliases for common dependency patterns
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ApiResponseDep = Annotated[ApiResponse, Depends(get_api_response)]
