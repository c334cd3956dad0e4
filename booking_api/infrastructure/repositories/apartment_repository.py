"""
SQLAlchemy Implementation of Apartment Repository.
"""

from typing import List, Optional

from sqlalchemy import or_

from booking_api.domain.models.apartment import Apartment
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.schemas.apartment import ApartmentFilter
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyApartmentRepository(SQLAlchemyRepository[Apartment], ApartmentRepository):
    """Apartment repository implementation using SQLAlchemy."""

    def get_for_update(self, id: int) -> Optional[Apartment]:
        return self.query().filter(Apartment.id == id).with_for_update().first()

    def search(self, filters: ApartmentFilter, skip: int, limit: int) -> PageResult[Apartment]:
        query = self.query()

        if filters.category:
            query = query.filter(Apartment.category == filters.category)
        if filters.location:
            query = query.filter(Apartment.location.ilike(f"%{filters.location}%"))
        if filters.min_price is not None:
            query = query.filter(Apartment.price >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Apartment.price <= filters.max_price)
        if filters.capacity is not None:
            query = query.filter(Apartment.capacity >= filters.capacity)
        if filters.search:
            pattern = f"%{filters.search}%"
            query = query.filter(
                or_(
                    Apartment.title.ilike(pattern),
                    Apartment.description.ilike(pattern),
                    Apartment.location.ilike(pattern),
                )
            )

        query = query.order_by(Apartment.created_at.desc(), Apartment.id.desc())
        return self.paginate(query, skip, limit)

    def _distinct(self, column) -> List[str]:
        rows = (
            self.db.query(column)
            .filter(Apartment.active(), column.isnot(None))
            .distinct()
            .order_by(column)
            .all()
        )
        return [row[0] for row in rows]

    def list_categories(self) -> List[str]:
        return self._distinct(Apartment.category)

    def list_locations(self) -> List[str]:
        return self._distinct(Apartment.location)
