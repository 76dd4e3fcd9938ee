"""User service for business logic operations.

This module validates caller input, assigns timestamps to new users and
delegates storage to the user repository.
"""

from datetime import datetime, timezone

from ..exceptions import ValidationError
from ..logging_config import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.user_schemas import CreateUserRequest

logger = get_logger(__name__)

MAX_USER_ID_LENGTH = 100
MAX_USER_NAME_LENGTH = 500
FORBIDDEN_ID_CHARACTERS = frozenset("/?#%")


def validate_user_id(user_id: str) -> list[str]:
    """Check a user identifier.

    Args:
        user_id: Identifier supplied by the caller

    Returns:
        Violation messages in a fixed order, empty when the identifier is valid
    """
    if not user_id or not user_id.strip():
        return ["User ID cannot be empty"]

    errors = []
    if FORBIDDEN_ID_CHARACTERS.intersection(user_id):
        errors.append("User ID contains invalid characters")
    if len(user_id) > MAX_USER_ID_LENGTH:
        errors.append(f"User ID must be at most {MAX_USER_ID_LENGTH} characters")
    return errors


def validate_user_name(name: str) -> list[str]:
    if not name or not name.strip():
        return ["User name cannot be empty"]
    if len(name) > MAX_USER_NAME_LENGTH:
        return [f"User name must be at most {MAX_USER_NAME_LENGTH} characters"]
    return []


class UserService:
    """Service for user business logic operations."""

    def __init__(self, repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            repository: Repository the service stores users through
        """
        self.repository = repository

    async def create_user(self, request: CreateUserRequest) -> User:
        """Create a new user stamped with the current time.

        Args:
            request: Validated request body

        Returns:
            User as stored

        Raises:
            ValidationError: If the identifier or name is invalid
            DatabaseError: If the store rejects the insert
        """
        errors = validate_user_id(request.id) + validate_user_name(request.name)
        if errors:
            raise ValidationError("Invalid user data", errors)

        now = datetime.now(timezone.utc)
        user = User(id=request.id, name=request.name, created_at=now, updated_at=now)

        created = await self.repository.create(user)
        logger.info(f"Created user: {created.id}")
        return created

    async def get_user_by_id(self, user_id: str) -> User:
        """Get user by identifier.

        Raises:
            ValidationError: If the identifier is invalid
            UserNotFoundError: If no user has this identifier
            DatabaseError: If the lookup fails
        """
        errors = validate_user_id(user_id)
        if errors:
            raise ValidationError("Invalid user ID", errors)

        return await self.repository.find_by_id(user_id)
