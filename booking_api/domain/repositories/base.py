"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, List, Optional, Protocol, Tuple, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations. Soft-deleted rows are never returned."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def add(self, obj: T) -> T:
        """Stage a new entity in the current unit of work and assign its ID."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create and commit a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Update and commit an existing entity."""
        ...

    def delete(self, db_obj: T) -> None:
        """Delete an entity; soft-deletable entities are only flagged."""
        ...

    def commit(self) -> None:
        """Commit the current unit of work."""
        ...

    def rollback(self) -> None:
        """Discard the current unit of work."""
        ...


PageResult = Tuple[List[T], int]
