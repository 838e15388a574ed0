"""
Input models for request validation using Pydantic.

Presence of required fields is checked with ``validate_required_fields``
before these models run, so the models only deal with types and ranges.
"""

from typing import Annotated, Any, Optional

from pydantic import ConfigDict, Field, field_validator

from crud_service.models.base import CamelModel


class CreateUserRequest(CamelModel):
    """Request model for creating a new user."""

    name: Annotated[str, Field(
        min_length=1,
        description='Display name of the user',
        examples=['Ada Lovelace']
    )]

    email: Annotated[str, Field(
        description='Email address of the user',
        examples=['ada@example.com']
    )]


class UpdateUserRequest(CamelModel):
    """Request model for updating an existing user."""

    name: Annotated[Optional[str], Field(
        default=None,
        description='New display name; empty keeps the current value'
    )] = None

    email: Annotated[Optional[str], Field(
        default=None,
        description='New email address; empty keeps the current value'
    )] = None


class QueueMessage(CamelModel):
    """Message consumed from the orders queue."""

    model_config = ConfigDict(extra='allow')

    order_id: Annotated[Optional[str], Field(
        default=None,
        description='Identifier of the order to process',
        examples=['12345']
    )] = None

    status: Annotated[Optional[str], Field(
        default=None,
        description='Order status carried by the message',
        examples=['pending']
    )] = None

    data: Annotated[Any, Field(
        default=None,
        description='Arbitrary payload attached to the message'
    )] = None

    @field_validator('order_id', mode='before')
    @classmethod
    def coerce_numeric_order_id(cls, v: Any) -> Any:
        """Accept numeric order identifiers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
