"""
Favorite Repository Interface.
"""

from typing import Optional

from booking_api.domain.models.favorite import Favorite
from booking_api.domain.repositories.base import BaseRepository, PageResult


class FavoriteRepository(BaseRepository[Favorite]):
    """Interface for Favorite-specific operations."""

    def get_for_user(self, user_id: int, apartment_id: int) -> Optional[Favorite]:
        ...

    def list_for_user(self, user_id: int, skip: int, limit: int) -> PageResult[Favorite]:
        """Favorites of one user whose apartment is still active, newest first."""
        ...
