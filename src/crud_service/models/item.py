"""
Item model served by the items API.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from crud_service.models.base import CamelModel


class Item(CamelModel):
    """Catalogue item."""

    id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the item',
        examples=['item_9b1d4c2e7f3a4b8c9d0e1f2a3b4c5d6e']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Item name',
        examples=['Item 1']
    )]

    description: Annotated[Optional[str], Field(
        default=None,
        max_length=500,
        description='Optional item description'
    )] = None

    price: Annotated[Optional[float], Field(
        default=None,
        ge=0,
        description='Optional unit price',
        examples=[19.99]
    )] = None

    created_at: Annotated[datetime, Field(
        description='UTC timestamp when the item was created'
    )]

    updated_at: Annotated[Optional[datetime], Field(
        default=None,
        description='UTC timestamp of the last update'
    )] = None
