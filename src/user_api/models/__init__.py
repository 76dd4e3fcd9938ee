"""SQLModel data models.

Import models from here so they are registered with SQLModel metadata
before tables are created.
"""

from .user import User

__all__ = ["User"]
