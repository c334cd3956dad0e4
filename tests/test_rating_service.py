"""
Rating/comment linking for reservation-backed and direct ratings.
"""

from datetime import datetime

import pytest

from booking_api.application.services import rating_service
from booking_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from booking_api.domain.models.reservation import ReservationStatus
from booking_api.domain.schemas.common import PageParams
from booking_api.domain.schemas.rating import DirectRatingCreate, RatingCreate, RatingUpdate

from fakes import (
    FakeApartmentRepository,
    FakeCommentRepository,
    FakeRatingRepository,
    FakeReservationRepository,
    make_apartment,
    make_reservation,
    make_user,
)


class TestRatings:

    def setup_method(self):
        self.apartments = FakeApartmentRepository()
        self.reservations = FakeReservationRepository()
        self.ratings = FakeRatingRepository()
        self.comments = FakeCommentRepository()
        self.apartment = make_apartment(self.apartments)
        self.user = make_user(1)
        self.reservation = make_reservation(
            self.reservations, self.user, self.apartment,
            datetime(2025, 5, 15), datetime(2025, 5, 18),
            status=ReservationStatus.COMPLETED,
        )

    def rate(self, value=5, comment=None, user=None, apartment_id=None):
        data = RatingCreate(
            apartment_id=apartment_id or self.apartment.id,
            reservation_id=self.reservation.id,
            value=value,
            comment=comment,
        )
        return rating_service.rate_reservation(
            self.ratings, self.comments, self.reservations, user or self.user, data
        )

    def rate_direct(self, value=4, user=None, text=None):
        data = DirectRatingCreate(apartment_id=self.apartment.id, value=value, comment_text=text)
        return rating_service.rate_apartment(self.ratings, self.apartments, user or self.user, data)

    @pytest.mark.parametrize("status", [ReservationStatus.PENDING, ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED])
    def test_only_completed_reservations_can_be_rated(self, status):
        self.reservation.status = status
        with pytest.raises(ConflictError, match="Can only rate completed reservations"):
            self.rate()
        assert self.ratings.rows == []

    def test_rating_with_comment_links_comment(self):
        rating = self.rate(comment="Lovely stay")

        assert rating.comment_id is not None
        comment = self.comments.get_by_id(rating.comment_id)
        assert comment.text == "Lovely stay"
        assert comment.apartment_id == self.apartment.id
        assert rating_service.to_rating_read(rating).comment == "Lovely stay"

    def test_rating_without_comment(self):
        rating = self.rate()
        assert rating.comment_id is None
        assert self.comments.rows == []

    def test_reservation_rated_once(self):
        self.rate()
        with pytest.raises(ConflictError):
            self.rate(value=3)

    def test_other_users_reservation(self):
        with pytest.raises(AuthorizationError):
            self.rate(user=make_user(2))

    def test_apartment_must_match_reservation(self):
        other = make_apartment(self.apartments)
        with pytest.raises(ValidationError):
            self.rate(apartment_id=other.id)

    def test_second_direct_rating_conflicts(self):
        self.rate_direct()
        with pytest.raises(ConflictError):
            self.rate_direct(value=2)

    def test_direct_and_reservation_ratings_coexist(self):
        self.rate_direct(text="Nice building")
        self.rate()
        assert len(self.ratings.rows) == 2

    def test_other_user_may_rate_directly(self):
        self.rate_direct()
        assert self.rate_direct(user=make_user(2)).user_id == 2

    def test_direct_rating_unknown_apartment(self):
        data = DirectRatingCreate(apartment_id=99, value=3)
        with pytest.raises(NotFoundError):
            rating_service.rate_apartment(self.ratings, self.apartments, self.user, data)

    def test_update_creates_comment_when_missing(self):
        rating = self.rate()
        updated = rating_service.update_rating(
            self.ratings, self.comments, rating.id, self.user, RatingUpdate(value=3, comment="Changed my mind")
        )
        assert updated.value == 3
        assert self.comments.get_by_id(updated.comment_id).text == "Changed my mind"

    def test_update_edits_linked_comment(self):
        rating = self.rate(comment="First")
        comment_id = rating.comment_id
        rating_service.update_rating(
            self.ratings, self.comments, rating.id, self.user, RatingUpdate(value=4, comment="Second")
        )
        assert rating.comment_id == comment_id
        assert len(self.comments.rows) == 1
        assert self.comments.rows[0].text == "Second"

    def test_update_by_other_user(self):
        rating = self.rate()
        with pytest.raises(AuthorizationError):
            rating_service.update_rating(
                self.ratings, self.comments, rating.id, make_user(2), RatingUpdate(value=1)
            )

    def test_delete_soft_deletes_comment(self):
        rating = self.rate(comment="Bye")
        comment = self.comments.get_by_id(rating.comment_id)

        rating_service.delete_rating(self.ratings, self.comments, rating.id, self.user)

        assert self.ratings.rows == []
        assert comment.is_deleted is True
        assert self.comments.get_by_id(comment.id) is None

    def test_summary_average_and_distribution(self):
        self.rate(value=5)
        self.rate_direct(value=4, user=make_user(2))
        self.rate_direct(value=4, user=make_user(3))

        summary = rating_service.rating_summary(self.ratings, self.apartments, self.apartment.id)

        assert summary.average_rating == 4.3
        assert summary.total_ratings == 3
        assert summary.rating_distribution.five_star == 1
        assert summary.rating_distribution.four_star == 2
        assert summary.rating_distribution.one_star == 0

    def test_summary_without_ratings(self):
        summary = rating_service.rating_summary(self.ratings, self.apartments, self.apartment.id)
        assert summary.average_rating == 0.0
        assert summary.total_ratings == 0

    def test_listing_for_apartment(self):
        self.rate(comment="Great")
        items, total = rating_service.list_apartment_ratings(
            self.ratings, self.apartment.id, PageParams(page=1, limit=10)
        )
        assert total == 1
        assert items[0].comment == "Great"
