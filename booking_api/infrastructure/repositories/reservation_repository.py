"""
SQLAlchemy Implementation of Reservation Repository.
"""

from datetime import datetime
from typing import List, Optional

from booking_api.domain.models.reservation import Reservation
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyReservationRepository(SQLAlchemyRepository[Reservation], ReservationRepository):
    """Reservation repository implementation using SQLAlchemy."""

    def get_for_update(self, id: int) -> Optional[Reservation]:
        return self.query().filter(Reservation.id == id).with_for_update().first()

    def find_conflicts(
        self,
        apartment_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_id: Optional[int] = None,
    ) -> List[Reservation]:
        query = self.db.query(Reservation).filter(
            Reservation.apartment_id == apartment_id,
            Reservation.blocking(),
            Reservation.overlapping(start_time, end_time),
        )
        if exclude_id is not None:
            query = query.filter(Reservation.id != exclude_id)
        return query.order_by(Reservation.start_time).all()

    def list_reservations(
        self,
        user_id: Optional[int],
        status: Optional[str],
        skip: int,
        limit: int,
    ) -> PageResult[Reservation]:
        query = self.query()
        if user_id is not None:
            query = query.filter(Reservation.user_id == user_id)
        if status:
            query = query.filter(Reservation.status == status)
        query = query.order_by(Reservation.created_at.desc(), Reservation.id.desc())
        return self.paginate(query, skip, limit)
