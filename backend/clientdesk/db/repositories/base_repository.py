"""
Base repository class with common CRUD operations.
Repositories hold records in memory, in insertion order.
"""

from typing import Generic, TypeVar, Type, Optional, List

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: Type[ModelType]):
        """
        Initialize repository.

        Args:
            model: Pydantic model class with an integer ``id`` field
        """
        self.model = model
        self._records: List[ModelType] = []

    def next_id(self) -> int:
        """
        Id for the next created record.

        Returns:
            Current maximum id plus one, or 1 when the repository is empty
        """
        return max((record.id for record in self._records), default=0) + 1

    def create(self, **kwargs) -> ModelType:
        """
        Create a new record and append it.

        Args:
            **kwargs: Model attributes (an ``id`` is assigned here)

        Returns:
            Created model instance
        """
        kwargs.pop("id", None)
        instance = self.model(id=self.next_id(), **kwargs)
        self._records.append(instance)
        return instance

    def get(self, id: int) -> Optional[ModelType]:
        """
        Get a record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance or None
        """
        index = self._index_of(id)
        if index is None:
            return None
        return self._records[index]

    def list(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        **filters,
    ) -> List[ModelType]:
        """
        List records in insertion order, with pagination and equality filters.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None for all)
            **filters: Filter criteria

        Returns:
            List of model instances
        """
        records = [
            record for record in self._records
            if all(
                getattr(record, key) == value
                for key, value in filters.items()
                if key in self.model.model_fields
            )
        ]
        end = None if limit is None else skip + limit
        return records[skip:end]

    def count(self) -> int:
        """Number of stored records."""
        return len(self._records)

    def update(self, id: int, **kwargs) -> Optional[ModelType]:
        """
        Update a record in place, keeping its id and position.

        Args:
            id: Record ID
            **kwargs: Attributes to update

        Returns:
            Updated model instance or None
        """
        index = self._index_of(id)
        if index is None:
            return None

        values = self._records[index].model_dump()
        values.update(kwargs)
        values["id"] = id
        instance = self.model(**values)
        self._records[index] = instance
        return instance

    def delete(self, id: int) -> bool:
        """
        Delete a record.

        Args:
            id: Record ID

        Returns:
            True if deleted, False if not found
        """
        index = self._index_of(id)
        if index is None:
            return False
        del self._records[index]
        return True

    def clear(self) -> None:
        """Remove every record."""
        self._records = []

    def _index_of(self, id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == id:
                return index
        return None
