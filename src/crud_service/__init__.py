"""
Serverless CRUD functions service package.

This package follows the three-layer architecture pattern:

- handlers: Lambda entry points, request routing and response envelopes
- logic: Business rules and validation
- dal: Entity store
- models: Pydantic data models
"""

__version__ = "1.0.0"
__description__ = "AWS Lambda handlers for a users/items API, a queue consumer and scheduled tasks"

# Re-export commonly used classes for convenience
from crud_service.models.user import User
from crud_service.models.item import Item
from crud_service.models.output import ApiResponse, PaginatedResponse
from crud_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "User",
    "Item",
    "ApiResponse",
    "PaginatedResponse",
    "logger",
    "tracer",
    "metrics",
]
