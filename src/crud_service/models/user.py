"""
User domain model for the business logic layer.

This module defines the User entity kept in the entity store and served by
the users API.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import Field, field_validator

from crud_service.logic.ids import generate_id
from crud_service.logic.validation import is_valid_email
from crud_service.models.base import CamelModel

USER_ID_PREFIX = 'user'


class User(CamelModel):
    """Core User domain model."""

    id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the user',
        examples=['user_3f2c9a1e0b7d4c6e8a5f1b2d3c4e5f60']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Display name of the user',
        examples=['Ada Lovelace']
    )]

    email: Annotated[str, Field(
        description='Email address of the user',
        examples=['ada@example.com']
    )]

    created_at: Annotated[datetime, Field(
        description='UTC timestamp when the user was created'
    )]

    updated_at: Annotated[Optional[datetime], Field(
        default=None,
        description='UTC timestamp of the last update, absent until the user is modified'
    )] = None

    @field_validator('email')
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email format."""
        if not is_valid_email(v):
            raise ValueError('Invalid email format')
        return v

    @classmethod
    def create(cls, name: str, email: str) -> 'User':
        """
        Create a new user with a generated ID and creation timestamp.

        Args:
            name: Display name of the user
            email: Email address of the user

        Returns:
            New User instance
        """
        return cls(
            id=generate_id(USER_ID_PREFIX),
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
        )

    def with_changes(self, name: Optional[str] = None, email: Optional[str] = None) -> 'User':
        """
        Return an updated copy of the user.

        Empty or missing values keep the current field. ``id`` and
        ``created_at`` are always preserved.
        """
        return User(
            id=self.id,
            name=name or self.name,
            email=email or self.email,
            created_at=self.created_at,
            updated_at=datetime.now(timezone.utc),
        )
