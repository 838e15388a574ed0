"""
In-memory implementation of the entity store.

Entities live for the lifetime of the process and are lost on restart. The
host may run invocations concurrently, so a single re-entrant lock serializes
every operation on a store, reads included: mutations against the same id
apply in lock acquisition order and ``list`` never observes a half-applied
change.
"""

import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from crud_service.handlers.utils.observability import logger

T = TypeVar('T')


class InMemoryStore(Generic[T]):
    """Lock-guarded mapping from identifier to entity."""

    def __init__(self) -> None:
        self._entities: Dict[str, T] = {}
        self._lock = threading.RLock()

    def get(self, entity_id: str) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._entities.values())

    def put(self, entity_id: str, entity: T) -> None:
        with self._lock:
            self._entities[entity_id] = entity
        logger.debug('Entity stored', extra={'entity_id': entity_id})

    def update(self, entity_id: str, updater: Callable[[T], T]) -> Optional[T]:
        """
        Replace an existing entity with ``updater(entity)`` under the store lock.

        Returns:
            The new entity, or None if nothing is stored under ``entity_id``
        """
        with self._lock:
            current = self._entities.get(entity_id)
            if current is None:
                return None
            updated = updater(current)
            self._entities[entity_id] = updated
        logger.debug('Entity updated', extra={'entity_id': entity_id})
        return updated

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            existed = self._entities.pop(entity_id, None) is not None
        if existed:
            logger.debug('Entity deleted', extra={'entity_id': entity_id})
        return existed

    def clear(self) -> None:
        with self._lock:
            self._entities.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._entities
