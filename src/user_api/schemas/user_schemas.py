"""User request and response schemas.

These schemas describe the wire shapes only. Semantic checks on identifiers
and names live in the user service so that every violation is reported
through ``ValidationError``.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..models.user import User


class CreateUserRequest(BaseModel):
    """Schema for the create-user request body."""

    id: str = Field(
        ...,
        description="Caller-assigned user identifier",
        examples=["user-123"]
    )
    name: str = Field(
        ...,
        description="User's display name",
        examples=["Alice"]
    )


class UserResponse(BaseModel):
    """Schema for user API responses.

    Timestamps serialize as ISO-8601 strings under camelCase keys.
    """

    id: str = Field(description="User ID")
    name: str = Field(description="User's display name")
    created_at: datetime = Field(serialization_alias="createdAt", description="User creation timestamp")
    updated_at: datetime = Field(serialization_alias="updatedAt", description="Last update timestamp")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build a response from a stored user."""
        return cls(
            id=user.id,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
