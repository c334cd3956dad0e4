"""Favorite service — a user's bookmarked apartments."""

from typing import List, Tuple

import structlog

from booking_api.application.services.apartment_service import with_rating_stats
from booking_api.core.exceptions import ConflictError, NotFoundError
from booking_api.domain.models.favorite import Favorite
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.favorite_repository import FavoriteRepository
from booking_api.domain.repositories.rating_repository import RatingRepository
from booking_api.domain.schemas.common import PageParams
from booking_api.domain.schemas.favorite import FavoriteCheck, FavoriteRead

logger = structlog.get_logger(__name__)


def add_favorite(
    favorites: FavoriteRepository,
    apartments: ApartmentRepository,
    user: User,
    apartment_id: int,
) -> Favorite:
    apartment = apartments.get_by_id(apartment_id)
    if apartment is None:
        raise NotFoundError("Apartment", apartment_id)
    if favorites.get_for_user(user.id, apartment_id) is not None:
        raise ConflictError("Apartment is already in favorites")

    favorite = Favorite(user_id=user.id, apartment_id=apartment_id)
    favorite.apartment = apartment
    favorites.add(favorite)
    favorites.commit()
    logger.info("Favorite added", user_id=user.id, apartment_id=apartment_id)
    return favorite


def remove_favorite(favorites: FavoriteRepository, user: User, apartment_id: int) -> None:
    favorite = favorites.get_for_user(user.id, apartment_id)
    if favorite is None:
        raise NotFoundError("Favorite", apartment_id)
    favorites.delete(favorite)
    logger.info("Favorite removed", user_id=user.id, apartment_id=apartment_id)


def list_favorites(
    favorites: FavoriteRepository,
    ratings: RatingRepository,
    user: User,
    params: PageParams,
) -> Tuple[List[FavoriteRead], int]:
    items, total = favorites.list_for_user(user.id, params.offset, params.limit)
    apartments = with_rating_stats(ratings, [f.apartment for f in items])
    reads = [
        FavoriteRead(
            id=favorite.id,
            user_id=favorite.user_id,
            apartment_id=favorite.apartment_id,
            created_at=favorite.created_at,
            apartment=apartment,
        )
        for favorite, apartment in zip(items, apartments)
    ]
    return reads, total


def check_favorite(favorites: FavoriteRepository, user: User, apartment_id: int) -> FavoriteCheck:
    favorite = favorites.get_for_user(user.id, apartment_id)
    return FavoriteCheck(is_favorite=favorite is not None, favorite_id=favorite.id if favorite else None)
