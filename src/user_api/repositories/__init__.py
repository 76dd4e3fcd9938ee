"""Data access layer.

This module provides data access repositories for database operations
with typed failures.
"""

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
