"""Typed failures shared by the repository, service and HTTP layers.

Every failure the user API can report is one member of a closed set:
``UserNotFoundError``, ``DatabaseError`` or ``ValidationError``. Each carries
a human-readable message and a payload specific to its kind.
"""

from enum import Enum
from typing import Any, Optional, Sequence


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    NOT_FOUND = "not_found"
    DATABASE = "database"
    VALIDATION = "validation"


class UserError(Exception):
    """Base class for the user API failure taxonomy.

    Not raised directly; catch it to handle every taxonomy member at once.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserError):
    """Raised when no user exists for an identifier."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: str, message: Optional[str] = None) -> None:
        self.user_id = user_id
        super().__init__(message or f"User with id {user_id} not found")


class DatabaseError(UserError):
    """Raised when the underlying store fails for any reason."""

    kind = ErrorKind.DATABASE

    def __init__(self, message: str, cause: Optional[Any] = None) -> None:
        self.cause = cause
        super().__init__(message)


class ValidationError(UserError):
    """Raised when caller input fails shape or semantic checks."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__(message)
