"""
SQLAlchemy Implementations of Rating and Comment Repositories.
"""

from typing import Dict, Iterable, Optional, Tuple

from sqlalchemy import func

from booking_api.domain.models.comment import Comment
from booking_api.domain.models.rating import Rating
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.rating_repository import CommentRepository, RatingRepository
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyRatingRepository(SQLAlchemyRepository[Rating], RatingRepository):
    """Rating repository implementation using SQLAlchemy."""

    conflict_message = "You have already rated this apartment"

    def conflict_message_for(self, obj: Rating) -> str:
        if obj.reservation_id is not None:
            return "This reservation has already been rated"
        return self.conflict_message

    def get_by_reservation(self, reservation_id: int) -> Optional[Rating]:
        return self.query().filter(Rating.reservation_id == reservation_id).first()

    def get_direct(self, user_id: int, apartment_id: int) -> Optional[Rating]:
        return (
            self.query()
            .filter(
                Rating.user_id == user_id,
                Rating.apartment_id == apartment_id,
                Rating.reservation_id.is_(None),
            )
            .first()
        )

    def list_for_apartment(self, apartment_id: int, skip: int, limit: int) -> PageResult[Rating]:
        query = (
            self.query()
            .filter(Rating.apartment_id == apartment_id)
            .order_by(Rating.created_at.desc(), Rating.id.desc())
        )
        return self.paginate(query, skip, limit)

    def list_for_user(self, user_id: int, skip: int, limit: int) -> PageResult[Rating]:
        query = (
            self.query()
            .filter(Rating.user_id == user_id)
            .order_by(Rating.created_at.desc(), Rating.id.desc())
        )
        return self.paginate(query, skip, limit)

    def distribution(self, apartment_id: int) -> Dict[int, int]:
        rows = (
            self.db.query(Rating.value, func.count(Rating.id))
            .filter(Rating.apartment_id == apartment_id)
            .group_by(Rating.value)
            .all()
        )
        return {value: count for value, count in rows}

    def stats_for_apartments(self, apartment_ids: Iterable[int]) -> Dict[int, Tuple[float, int]]:
        ids = list(apartment_ids)
        if not ids:
            return {}
        rows = (
            self.db.query(Rating.apartment_id, func.avg(Rating.value), func.count(Rating.id))
            .filter(Rating.apartment_id.in_(ids))
            .group_by(Rating.apartment_id)
            .all()
        )
        return {apartment_id: (round(float(avg), 1), count) for apartment_id, avg, count in rows}


class SQLAlchemyCommentRepository(SQLAlchemyRepository[Comment], CommentRepository):
    """Comment repository implementation using SQLAlchemy."""
