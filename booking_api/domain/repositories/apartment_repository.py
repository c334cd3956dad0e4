"""
Apartment Repository Interface.
"""

from typing import List, Optional

from booking_api.domain.models.apartment import Apartment
from booking_api.domain.repositories.base import BaseRepository, PageResult
from booking_api.domain.schemas.apartment import ApartmentFilter


class ApartmentRepository(BaseRepository[Apartment]):
    """Interface for Apartment-specific operations."""

    def get_for_update(self, id: int) -> Optional[Apartment]:
        """Get an apartment and lock its row until the transaction ends."""
        ...

    def search(self, filters: ApartmentFilter, skip: int, limit: int) -> PageResult[Apartment]:
        """Filter and paginate apartments."""
        ...

    def list_categories(self) -> List[str]:
        """Distinct categories of active apartments."""
        ...

    def list_locations(self) -> List[str]:
        """Distinct locations of active apartments."""
        ...
