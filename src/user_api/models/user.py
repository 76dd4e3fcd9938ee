"""User table model.

This module defines the User SQLModel mapped onto the ``users`` table.
Identifiers are assigned by the caller and both timestamps are set by the
creator, never by the store.
"""

from datetime import datetime
from sqlmodel import SQLModel, Field, Column, DateTime


class User(SQLModel, table=True):
    """User model for database storage.

    Attributes:
        id: Caller-assigned identifier (primary key, immutable once created)
        name: User's display name
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
    """

    __tablename__ = "users"

    id: str = Field(
        primary_key=True,
        max_length=255,
        description="Caller-assigned user identifier"
    )
    name: str = Field(
        max_length=500,
        nullable=False,
        description="User's display name"
    )
    created_at: datetime = Field(
        description="Timestamp when user was created",
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime = Field(
        description="Timestamp when user was last updated",
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
