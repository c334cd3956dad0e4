"""
SQLAlchemy Implementation of Favorite Repository.
"""

from typing import Optional

from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.favorite import Favorite
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.favorite_repository import FavoriteRepository
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyFavoriteRepository(SQLAlchemyRepository[Favorite], FavoriteRepository):
    """Favorite repository implementation using SQLAlchemy."""

    conflict_message = "Apartment is already in favorites"

    def get_for_user(self, user_id: int, apartment_id: int) -> Optional[Favorite]:
        return (
            self.query()
            .filter(Favorite.user_id == user_id, Favorite.apartment_id == apartment_id)
            .first()
        )

    def list_for_user(self, user_id: int, skip: int, limit: int) -> PageResult[Favorite]:
        query = (
            self.query()
            .join(Apartment, Apartment.id == Favorite.apartment_id)
            .filter(Favorite.user_id == user_id, Apartment.active())
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        )
        return self.paginate(query, skip, limit)
