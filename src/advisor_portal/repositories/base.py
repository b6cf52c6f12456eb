"""Base repository pattern for all data access."""

from datetime import datetime, timezone
from typing import Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.exceptions import NotFoundError

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations over an in-memory map.

    Ids come from a per-repository counter and are never reused after a
    delete. Every operation completes within a single call, so a record is
    never observed half-written.
    """

    # Name of the server-assigned timestamp field on the model
    timestamp_field = "created_at"

    def __init__(self, model: Type[ModelType]):
        """
        Initialize repository.

        Args:
            model: Pydantic record class stored by this repository
        """
        self.model = model
        self._records: dict[int, ModelType] = {}
        self._next_id = 1

    def get(self, id: int) -> Optional[ModelType]:
        """Get single record by ID."""
        return self._records.get(id)

    def get_all(self) -> List[ModelType]:
        """Get all records in insertion order."""
        return list(self._records.values())

    def create(self, **data) -> ModelType:
        """Create new record, assigning id and timestamp. A supplied id is ignored."""
        data.pop("id", None)
        id = self._next_id
        self._next_id += 1

        data.setdefault(self.timestamp_field, datetime.now(timezone.utc))
        instance = self.model(id=id, **data)
        self._records[id] = instance
        return instance

    def update(self, id: int, /, **data) -> ModelType:
        """
        Shallow-merge fields onto an existing record.

        Raises:
            NotFoundError: No record with this id
        """
        instance = self._records.get(id)
        if instance is None:
            raise NotFoundError(self.model.__name__, id)

        data.pop("id", None)
        updated = instance.model_copy(update=data)
        self._records[id] = updated
        return updated

    def delete(self, id: int) -> bool:
        """Delete record. Deleting a missing id is a no-op."""
        instance = self._records.pop(id, None)
        if instance is None:
            return False

        self._after_delete(instance)
        return True

    def delete_many(self, ids: Iterable[int]) -> List[int]:
        """Delete every listed record that exists; return the ids removed."""
        return [id for id in ids if self.delete(id)]

    def exists(self, id: int) -> bool:
        """Check if record exists."""
        return id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _after_delete(self, instance: ModelType) -> None:
        """Hook for dependent-record cleanup."""
