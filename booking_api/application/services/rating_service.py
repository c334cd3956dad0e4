"""Rating service — reservation-linked and direct ratings with their comments."""

from typing import List, Tuple

import structlog

from booking_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from booking_api.domain.models.comment import Comment
from booking_api.domain.models.rating import MAX_RATING, MIN_RATING, Rating
from booking_api.domain.models.reservation import ReservationStatus
from booking_api.domain.models.user import User
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.rating_repository import CommentRepository, RatingRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import PageParams
from booking_api.domain.schemas.rating import (
    DirectRatingCreate,
    RatingCreate,
    RatingDistribution,
    RatingRead,
    RatingSummary,
    RatingUpdate,
)

logger = structlog.get_logger(__name__)

_STAR_FIELDS = {5: "five_star", 4: "four_star", 3: "three_star", 2: "two_star", 1: "one_star"}


def to_rating_read(rating: Rating) -> RatingRead:
    comment = rating.comment
    if comment is not None and not comment.is_deleted:
        text = comment.text
    else:
        text = rating.comment_text
    return RatingRead(
        id=rating.id,
        user_id=rating.user_id,
        apartment_id=rating.apartment_id,
        reservation_id=rating.reservation_id,
        value=rating.value,
        comment_id=rating.comment_id,
        comment=text,
        user_name=rating.user.name if rating.user is not None else None,
        created_at=rating.created_at,
    )


def _check_value(value: int) -> None:
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}", field="value")


def _new_comment(comments: CommentRepository, user_id: int, apartment_id: int, text: str) -> Comment:
    comment = Comment(user_id=user_id, apartment_id=apartment_id, text=text, is_deleted=False)
    return comments.add(comment)


def rate_reservation(
    ratings: RatingRepository,
    comments: CommentRepository,
    reservations: ReservationRepository,
    user: User,
    data: RatingCreate,
) -> Rating:
    """Rate a completed reservation; an optional comment becomes a linked Comment."""
    _check_value(data.value)

    reservation = reservations.get_by_id(data.reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", data.reservation_id)
    if reservation.user_id != user.id:
        raise AuthorizationError("You can only rate your own reservations")
    if reservation.apartment_id != data.apartment_id:
        raise ValidationError("Reservation does not belong to this apartment", field="apartment_id")
    if reservation.status != ReservationStatus.COMPLETED:
        raise ConflictError(
            "Can only rate completed reservations",
            {"reservation_status": reservation.status},
        )
    if ratings.get_by_reservation(reservation.id) is not None:
        raise ConflictError("This reservation has already been rated")

    comment = None
    if data.comment:
        comment = _new_comment(comments, user.id, reservation.apartment_id, data.comment)

    rating = Rating(
        user_id=user.id,
        apartment_id=reservation.apartment_id,
        reservation_id=reservation.id,
        value=data.value,
        comment_id=comment.id if comment is not None else None,
    )
    rating.comment = comment
    ratings.add(rating)
    ratings.commit()

    logger.info("Rating created", rating_id=rating.id, reservation_id=reservation.id, value=rating.value)
    return rating


def rate_apartment(
    ratings: RatingRepository,
    apartments: ApartmentRepository,
    user: User,
    data: DirectRatingCreate,
) -> Rating:
    """Direct rating without a reservation; one per user and apartment."""
    _check_value(data.value)

    if apartments.get_by_id(data.apartment_id) is None:
        raise NotFoundError("Apartment", data.apartment_id)
    if ratings.get_direct(user.id, data.apartment_id) is not None:
        raise ConflictError("You have already rated this apartment")

    rating = Rating(
        user_id=user.id,
        apartment_id=data.apartment_id,
        reservation_id=None,
        value=data.value,
        comment_text=data.comment_text,
    )
    ratings.add(rating)
    ratings.commit()

    logger.info("Direct rating created", rating_id=rating.id, apartment_id=data.apartment_id, value=rating.value)
    return rating


def _owned_rating(ratings: RatingRepository, rating_id: int, user: User) -> Rating:
    rating = ratings.get_by_id(rating_id)
    if rating is None:
        raise NotFoundError("Rating", rating_id)
    if rating.user_id != user.id:
        raise AuthorizationError("You can only modify your own ratings")
    return rating


def update_rating(
    ratings: RatingRepository,
    comments: CommentRepository,
    rating_id: int,
    user: User,
    data: RatingUpdate,
) -> Rating:
    _check_value(data.value)
    rating = _owned_rating(ratings, rating_id, user)
    rating.value = data.value

    if data.comment is not None:
        comment = comments.get_by_id(rating.comment_id) if rating.comment_id is not None else None
        if comment is not None:
            comment.text = data.comment
        else:
            comment = _new_comment(comments, user.id, rating.apartment_id, data.comment)
            rating.comment_id = comment.id
            rating.comment = comment

    ratings.commit()
    logger.info("Rating updated", rating_id=rating.id, value=rating.value)
    return rating


def delete_rating(
    ratings: RatingRepository,
    comments: CommentRepository,
    rating_id: int,
    user: User,
) -> None:
    """Remove the rating; its linked comment is kept but hidden."""
    rating = _owned_rating(ratings, rating_id, user)
    if rating.comment_id is not None:
        comment = comments.get_by_id(rating.comment_id)
        if comment is not None:
            comment.soft_delete()
    ratings.delete(rating)
    logger.info("Rating deleted", rating_id=rating_id, user_id=user.id)


def list_apartment_ratings(
    ratings: RatingRepository,
    apartment_id: int,
    params: PageParams,
) -> Tuple[List[RatingRead], int]:
    items, total = ratings.list_for_apartment(apartment_id, params.offset, params.limit)
    return [to_rating_read(r) for r in items], total


def list_user_ratings(
    ratings: RatingRepository,
    user_id: int,
    params: PageParams,
) -> Tuple[List[RatingRead], int]:
    items, total = ratings.list_for_user(user_id, params.offset, params.limit)
    return [to_rating_read(r) for r in items], total


def rating_summary(
    ratings: RatingRepository,
    apartments: ApartmentRepository,
    apartment_id: int,
) -> RatingSummary:
    """Average rounded to one decimal plus the 1..5 star distribution."""
    if apartments.get_by_id(apartment_id) is None:
        raise NotFoundError("Apartment", apartment_id)

    counts = ratings.distribution(apartment_id)
    total = sum(counts.values())
    average = round(sum(value * count for value, count in counts.items()) / total, 1) if total else 0.0

    distribution = RatingDistribution(
        **{field: counts.get(value, 0) for value, field in _STAR_FIELDS.items()}
    )
    return RatingSummary(
        apartment_id=apartment_id,
        average_rating=average,
        total_ratings=total,
        rating_distribution=distribution,
    )
