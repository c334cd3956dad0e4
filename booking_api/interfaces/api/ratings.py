"""Rating API routes — rate reservations or apartments, read averages."""

from fastapi import APIRouter, Depends, status

from booking_api.application.services import rating_service
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.rating_repository import CommentRepository, RatingRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import MessageResponse, Page, PageParams
from booking_api.domain.schemas.rating import (
    DirectRatingCreate,
    RatingCreate,
    RatingRead,
    RatingSummary,
    RatingUpdate,
)
from booking_api.interfaces.api.deps import get_current_user, get_page_params
from booking_api.interfaces.deps import (
    get_apartment_repository,
    get_comment_repository,
    get_rating_repository,
    get_reservation_repository,
)

router = APIRouter(prefix="/api/ratings", tags=["Ratings"])


@router.post("", response_model=RatingRead, status_code=status.HTTP_201_CREATED)
def rate_reservation(
    body: RatingCreate,
    ratings: RatingRepository = Depends(get_rating_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    reservations: ReservationRepository = Depends(get_reservation_repository),
    user: User = Depends(get_current_user),
):
    """Rate a completed reservation, optionally with a comment."""
    rating = rating_service.rate_reservation(ratings, comments, reservations, user, body)
    return rating_service.to_rating_read(rating)


@router.post("/direct", response_model=RatingRead, status_code=status.HTTP_201_CREATED)
def rate_apartment(
    body: DirectRatingCreate,
    ratings: RatingRepository = Depends(get_rating_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    user: User = Depends(get_current_user),
):
    """Rate an apartment without a reservation."""
    rating = rating_service.rate_apartment(ratings, apartments, user, body)
    return rating_service.to_rating_read(rating)


@router.get("/apartment/{apartment_id}", response_model=Page[RatingRead])
def apartment_ratings(
    apartment_id: int,
    params: PageParams = Depends(get_page_params),
    ratings: RatingRepository = Depends(get_rating_repository),
):
    items, total = rating_service.list_apartment_ratings(ratings, apartment_id, params)
    return Page[RatingRead].build(items, total, params)


@router.get("/apartment/{apartment_id}/average", response_model=RatingSummary)
def apartment_average(
    apartment_id: int,
    ratings: RatingRepository = Depends(get_rating_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
):
    return rating_service.rating_summary(ratings, apartments, apartment_id)


@router.get("/my", response_model=Page[RatingRead])
def my_ratings(
    params: PageParams = Depends(get_page_params),
    ratings: RatingRepository = Depends(get_rating_repository),
    user: User = Depends(get_current_user),
):
    items, total = rating_service.list_user_ratings(ratings, user.id, params)
    return Page[RatingRead].build(items, total, params)


@router.put("/{rating_id}", response_model=RatingRead)
def update_rating(
    rating_id: int,
    body: RatingUpdate,
    ratings: RatingRepository = Depends(get_rating_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    user: User = Depends(get_current_user),
):
    rating = rating_service.update_rating(ratings, comments, rating_id, user, body)
    return rating_service.to_rating_read(rating)


@router.delete("/{rating_id}", response_model=MessageResponse)
def delete_rating(
    rating_id: int,
    ratings: RatingRepository = Depends(get_rating_repository),
    comments: CommentRepository = Depends(get_comment_repository),
    user: User = Depends(get_current_user),
):
    rating_service.delete_rating(ratings, comments, rating_id, user)
    return MessageResponse(message="Rating deleted successfully")
