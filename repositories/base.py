"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
Records are held in process memory, keyed by their store-assigned id.
"""

from typing import Dict, Generic, Iterator, List, Optional, Type, TypeVar
from uuid import uuid4
from abc import ABC

from app.exceptions import NotFoundError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations over an in-memory collection.
    All repositories should inherit from this class.

    Records keep their insertion order; replacing a record keeps its position.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self._records: Dict[str, ModelType] = {}

    def _new_id(self) -> str:
        entity_id = str(uuid4())
        while entity_id in self._records:
            entity_id = str(uuid4())
        return entity_id

    def list(self) -> List[ModelType]:
        """Get all entities in insertion order"""
        return list(self._records.values())

    def get(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by ID, or None if not found"""
        return self._records.get(entity_id)

    def create(self, **fields) -> ModelType:
        """
        Create new entity with a freshly assigned id.

        Any ``id`` supplied in ``fields`` is ignored.

        Returns:
            The stored entity including its id
        """
        fields.pop("id", None)
        entity = self.model(id=self._new_id(), **fields)
        self._records[entity.id] = entity
        return entity

    def update(self, entity_id: str, **fields) -> ModelType:
        """
        Replace an existing entity with the given fields.

        Raises:
            NotFoundError: If no entity has this id
        """
        if entity_id not in self._records:
            raise NotFoundError(
                f"{self.model.__name__} {entity_id} not found",
                details={"id": entity_id},
            )
        fields.pop("id", None)
        entity = self.model(id=entity_id, **fields)
        self._records[entity_id] = entity
        return entity

    def delete(self, entity_id: str) -> bool:
        """Delete entity by ID; returns False when nothing was removed"""
        return self._records.pop(entity_id, None) is not None

    def exists(self, entity_id: str) -> bool:
        """Check if entity exists"""
        return entity_id in self._records

    def clear(self) -> None:
        """Remove every entity"""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def __iter__(self) -> Iterator[ModelType]:
        return iter(self.list())
