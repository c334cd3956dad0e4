"""Favorite API routes — bookmark apartments."""

from fastapi import APIRouter, Depends, status

from booking_api.application.services import favorite_service
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.favorite_repository import FavoriteRepository
from booking_api.domain.repositories.rating_repository import RatingRepository
from booking_api.domain.schemas.common import MessageResponse, Page, PageParams
from booking_api.domain.schemas.favorite import FavoriteCheck, FavoriteCreate, FavoriteRead
from booking_api.interfaces.api.deps import get_current_user, get_page_params
from booking_api.interfaces.deps import (
    get_apartment_repository,
    get_favorite_repository,
    get_rating_repository,
)

router = APIRouter(prefix="/api/favorites", tags=["Favorites"])


@router.post("", response_model=FavoriteRead, status_code=status.HTTP_201_CREATED)
def add_favorite(
    body: FavoriteCreate,
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    user: User = Depends(get_current_user),
):
    favorite = favorite_service.add_favorite(favorites, apartments, user, body.apartment_id)
    return FavoriteRead(
        id=favorite.id,
        user_id=favorite.user_id,
        apartment_id=favorite.apartment_id,
        created_at=favorite.created_at,
    )


@router.delete("/{apartment_id}", response_model=MessageResponse)
def remove_favorite(
    apartment_id: int,
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    favorite_service.remove_favorite(favorites, user, apartment_id)
    return MessageResponse(message="Apartment removed from favorites successfully")


@router.get("", response_model=Page[FavoriteRead])
def list_favorites(
    params: PageParams = Depends(get_page_params),
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    ratings: RatingRepository = Depends(get_rating_repository),
    user: User = Depends(get_current_user),
):
    items, total = favorite_service.list_favorites(favorites, ratings, user, params)
    return Page[FavoriteRead].build(items, total, params)


@router.get("/check/{apartment_id}", response_model=FavoriteCheck)
def check_favorite(
    apartment_id: int,
    favorites: FavoriteRepository = Depends(get_favorite_repository),
    user: User = Depends(get_current_user),
):
    return favorite_service.check_favorite(favorites, user, apartment_id)
