"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from booking_api.domain.models.activity_log import ActivityLog
from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.comment import Comment
from booking_api.domain.models.favorite import Favorite
from booking_api.domain.models.payment import Payment
from booking_api.domain.models.rating import Rating
from booking_api.domain.models.reservation import Reservation
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.favorite_repository import FavoriteRepository
from booking_api.domain.repositories.payment_repository import PaymentRepository
from booking_api.domain.repositories.rating_repository import CommentRepository, RatingRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.infrastructure.database import get_db
from booking_api.infrastructure.payment_gateway import PaymentGateway, SimulatedPaymentGateway
from booking_api.infrastructure.repositories.activity_log_repository import SQLAlchemyActivityLogRepository
from booking_api.infrastructure.repositories.apartment_repository import SQLAlchemyApartmentRepository
from booking_api.infrastructure.repositories.favorite_repository import SQLAlchemyFavoriteRepository
from booking_api.infrastructure.repositories.payment_repository import SQLAlchemyPaymentRepository
from booking_api.infrastructure.repositories.rating_repository import (
    SQLAlchemyCommentRepository,
    SQLAlchemyRatingRepository,
)
from booking_api.infrastructure.repositories.reservation_repository import SQLAlchemyReservationRepository
from booking_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_apartment_repository(db: Session = Depends(get_db)) -> ApartmentRepository:
    """Get apartment repository instance."""
    return SQLAlchemyApartmentRepository(db, Apartment)


def get_reservation_repository(db: Session = Depends(get_db)) -> ReservationRepository:
    """Get reservation repository instance."""
    return SQLAlchemyReservationRepository(db, Reservation)


def get_payment_repository(db: Session = Depends(get_db)) -> PaymentRepository:
    """Get payment repository instance."""
    return SQLAlchemyPaymentRepository(db, Payment)


def get_rating_repository(db: Session = Depends(get_db)) -> RatingRepository:
    """Get rating repository instance."""
    return SQLAlchemyRatingRepository(db, Rating)


def get_comment_repository(db: Session = Depends(get_db)) -> CommentRepository:
    """Get comment repository instance."""
    return SQLAlchemyCommentRepository(db, Comment)


def get_favorite_repository(db: Session = Depends(get_db)) -> FavoriteRepository:
    """Get favorite repository instance."""
    return SQLAlchemyFavoriteRepository(db, Favorite)


def get_activity_repository(db: Session = Depends(get_db)) -> ActivityLogRepository:
    """Get activity log repository instance."""
    return SQLAlchemyActivityLogRepository(db, ActivityLog)


def get_payment_gateway() -> PaymentGateway:
    """Get the payment gateway; tests override this dependency."""
    return SimulatedPaymentGateway()
