"""
Output models for API responses using Pydantic.

Every HTTP handler answers with an ``ApiResponse`` envelope; list endpoints
that page their results put a ``PaginatedResponse`` in the envelope data.
"""

from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

from crud_service.models.base import CamelModel

T = TypeVar('T')


class ApiResponse(BaseModel):
    """Uniform success/error envelope."""

    success: Annotated[bool, Field(
        description='Whether the request succeeded'
    )]

    data: Annotated[Any, Field(
        default=None,
        description='Response payload, present only on success'
    )] = None

    error: Annotated[Optional[str], Field(
        default=None,
        description='Error message, present only on failure',
        examples=['User not found']
    )] = None

    timestamp: Annotated[str, Field(
        description='ISO-8601 UTC timestamp of when the response was built',
        examples=['2024-01-15T10:30:00.000Z']
    )]

    @model_validator(mode='after')
    def check_payload_matches_outcome(self) -> 'ApiResponse':
        """Exactly one of data and error is populated, governed by success."""
        if self.success and self.error is not None:
            raise ValueError('successful responses cannot carry an error')
        if not self.success and self.error is None:
            raise ValueError('error responses require an error message')
        if not self.success and self.data is not None:
            raise ValueError('error responses cannot carry data')
        return self

    def to_body(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting the unused payload key."""
        return self.model_dump(
            mode='json',
            by_alias=True,
            exclude={'error'} if self.success else {'data'},
        )


class PaginatedResponse(CamelModel, Generic[T]):
    """A page of results."""

    items: Annotated[List[T], Field(
        description='Results on this page'
    )]

    total: Annotated[int, Field(
        ge=0,
        description='Total number of results across all pages'
    )]

    page: Annotated[int, Field(
        ge=1,
        description='1-based page number'
    )]

    page_size: Annotated[int, Field(
        ge=1,
        description='Maximum number of results per page'
    )]

    has_more: Annotated[bool, Field(
        description='Whether later pages exist'
    )]

    @classmethod
    def from_sequence(cls, results: List[T], page: int, page_size: int) -> 'PaginatedResponse[T]':
        """Slice ``results`` into the requested page."""
        start = (page - 1) * page_size
        end = start + page_size
        return cls(
            items=results[start:end],
            total=len(results),
            page=page,
            page_size=page_size,
            has_more=end < len(results),
        )
