"""Pydantic schemas for API validation and serialization."""

from .user_schemas import CreateUserRequest, UserResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
]
