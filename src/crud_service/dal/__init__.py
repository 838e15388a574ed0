"""
Data Access Layer (DAL) for the service.

This module provides the entity store interface and the factory used by the
handler layer to build the process-wide store instances.
"""

from typing import Callable, List, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class EntityStore(Protocol[T]):
    """Protocol defining the entity store interface."""

    def get(self, entity_id: str) -> Optional[T]:
        """Return the entity stored under ``entity_id``, or None."""
        ...

    def list(self) -> List[T]:
        """Return a snapshot of all stored entities."""
        ...

    def put(self, entity_id: str, entity: T) -> None:
        """Insert or overwrite the entity stored under ``entity_id``."""
        ...

    def update(self, entity_id: str, updater: Callable[[T], T]) -> Optional[T]:
        """Atomically replace an existing entity with ``updater(entity)``."""
        ...

    def delete(self, entity_id: str) -> bool:
        """Remove an entity, returning whether it existed."""
        ...


def get_entity_store() -> EntityStore:
    """
    Factory function to get an empty entity store.

    Returns:
        Entity store instance
    """
    # Import here to avoid circular imports
    from crud_service.dal.memory_store import InMemoryStore

    return InMemoryStore()


__all__ = [
    'EntityStore',
    'get_entity_store',
]
