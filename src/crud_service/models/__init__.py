"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including input validation models, output envelopes, and domain models.
"""

from .input import (
    CreateUserRequest,
    QueueMessage,
    UpdateUserRequest,
)
from .item import Item
from .output import ApiResponse, PaginatedResponse
from .user import User

__all__ = [
    # Input models
    "CreateUserRequest",
    "UpdateUserRequest",
    "QueueMessage",

    # Output models
    "ApiResponse",
    "PaginatedResponse",

    # Domain models
    "User",
    "Item",
]
