"""
Rating and Comment Repository Interfaces.
"""

from typing import Dict, Iterable, Optional, Tuple

from booking_api.domain.models.comment import Comment
from booking_api.domain.models.rating import Rating
from booking_api.domain.repositories.base import BaseRepository, PageResult


class RatingRepository(BaseRepository[Rating]):
    """Interface for Rating-specific operations."""

    def get_by_reservation(self, reservation_id: int) -> Optional[Rating]:
        """Get the rating attached to a reservation."""
        ...

    def get_direct(self, user_id: int, apartment_id: int) -> Optional[Rating]:
        """Get the reservation-less rating a user left on an apartment."""
        ...

    def list_for_apartment(self, apartment_id: int, skip: int, limit: int) -> PageResult[Rating]:
        ...

    def list_for_user(self, user_id: int, skip: int, limit: int) -> PageResult[Rating]:
        ...

    def distribution(self, apartment_id: int) -> Dict[int, int]:
        """Count of ratings per star value for one apartment."""
        ...

    def stats_for_apartments(self, apartment_ids: Iterable[int]) -> Dict[int, Tuple[float, int]]:
        """Map apartment id to (average rounded to one decimal, count)."""
        ...


class CommentRepository(BaseRepository[Comment]):
    """Interface for Comment operations."""
