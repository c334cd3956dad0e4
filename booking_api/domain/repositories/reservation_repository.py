"""
Reservation Repository Interface.
"""

from datetime import datetime
from typing import List, Optional

from booking_api.domain.models.reservation import Reservation
from booking_api.domain.repositories.base import BaseRepository, PageResult


class ReservationRepository(BaseRepository[Reservation]):
    """Interface for Reservation-specific operations."""

    def get_for_update(self, id: int) -> Optional[Reservation]:
        """Get a reservation and lock its row until the transaction ends."""
        ...

    def find_conflicts(
        self,
        apartment_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_id: Optional[int] = None,
    ) -> List[Reservation]:
        """Active reservations on the apartment whose range overlaps [start, end)."""
        ...

    def list_reservations(
        self,
        user_id: Optional[int],
        status: Optional[str],
        skip: int,
        limit: int,
    ) -> PageResult[Reservation]:
        """List reservations, optionally for one user and one status."""
        ...
