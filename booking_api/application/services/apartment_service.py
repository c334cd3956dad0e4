"""Apartment service — catalogue queries merged with rating stats, admin CRUD."""

from typing import List, Tuple

import structlog

from booking_api.core.exceptions import NotFoundError, ValidationError
from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.rating_repository import RatingRepository
from booking_api.domain.schemas.apartment import (
    ApartmentCreate,
    ApartmentFilter,
    ApartmentRead,
    ApartmentUpdate,
)
from booking_api.domain.schemas.common import PageParams

logger = structlog.get_logger(__name__)


def with_rating_stats(ratings: RatingRepository, apartments: List[Apartment]) -> List[ApartmentRead]:
    stats = ratings.stats_for_apartments([a.id for a in apartments])
    result = []
    for apartment in apartments:
        average, count = stats.get(apartment.id, (0.0, 0))
        read = ApartmentRead.model_validate(apartment)
        result.append(read.model_copy(update={"average_rating": average, "review_count": count}))
    return result


def list_apartments(
    apartments: ApartmentRepository,
    ratings: RatingRepository,
    filters: ApartmentFilter,
    params: PageParams,
) -> Tuple[List[ApartmentRead], int]:
    if (
        filters.min_price is not None
        and filters.max_price is not None
        and filters.min_price > filters.max_price
    ):
        raise ValidationError("minPrice cannot be greater than maxPrice", field="minPrice")
    items, total = apartments.search(filters, params.offset, params.limit)
    return with_rating_stats(ratings, items), total


def _get_or_404(apartments: ApartmentRepository, apartment_id: int) -> Apartment:
    apartment = apartments.get_by_id(apartment_id)
    if apartment is None:
        raise NotFoundError("Apartment", apartment_id)
    return apartment


def get_apartment(apartments: ApartmentRepository, ratings: RatingRepository, apartment_id: int) -> ApartmentRead:
    return with_rating_stats(ratings, [_get_or_404(apartments, apartment_id)])[0]


def create_apartment(apartments: ApartmentRepository, data: ApartmentCreate, admin: User) -> Apartment:
    apartment = apartments.create(data)
    logger.info("Apartment created", apartment_id=apartment.id, admin_id=admin.id)
    return apartment


def update_apartment(
    apartments: ApartmentRepository, apartment_id: int, data: ApartmentUpdate, admin: User
) -> Apartment:
    apartment = apartments.update(_get_or_404(apartments, apartment_id), data)
    logger.info("Apartment updated", apartment_id=apartment_id, admin_id=admin.id)
    return apartment


def delete_apartment(apartments: ApartmentRepository, apartment_id: int, admin: User) -> None:
    apartments.delete(_get_or_404(apartments, apartment_id))
    logger.info("Apartment deleted", apartment_id=apartment_id, admin_id=admin.id)


def list_categories(apartments: ApartmentRepository) -> List[str]:
    return apartments.list_categories()


def list_locations(apartments: ApartmentRepository) -> List[str]:
    return apartments.list_locations()
