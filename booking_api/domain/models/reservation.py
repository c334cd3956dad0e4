"""Reservation domain model and its status state machine."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, and_
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base
from booking_api.domain.models.mixins import SoftDeleteMixin


class ReservationStatus:
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    ALL = (PENDING, CONFIRMED, CANCELLED, COMPLETED)
    # Only these block new bookings
    ACTIVE = (PENDING, CONFIRMED)
    TERMINAL = (CANCELLED, COMPLETED)


# Allowed moves; anything else is a conflict
TRANSITIONS: dict[str, tuple[str, ...]] = {
    ReservationStatus.PENDING: (ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED),
    ReservationStatus.CONFIRMED: (ReservationStatus.COMPLETED, ReservationStatus.CANCELLED),
    ReservationStatus.CANCELLED: (),
    ReservationStatus.COMPLETED: (),
}


class Reservation(SoftDeleteMixin, Base):
    __tablename__ = "reservations"
    __table_args__ = (
        CheckConstraint("end_time > start_time", name="ck_reservations_time_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    apartment_id = Column(Integer, ForeignKey("apartments.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default=ReservationStatus.PENDING, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    apartment = relationship("Apartment")
    user = relationship("User")

    @classmethod
    def blocking(cls):
        """Predicate for reservations that can conflict with a new booking."""
        return and_(cls.active(), cls.status.in_(ReservationStatus.ACTIVE))

    @classmethod
    def overlapping(cls, start_time, end_time):
        """Half-open overlap: touching boundaries do not conflict."""
        return and_(cls.start_time < end_time, cls.end_time > start_time)

    @property
    def is_terminal(self) -> bool:
        return self.status in ReservationStatus.TERMINAL

    def can_transition_to(self, status: str) -> bool:
        return status in TRANSITIONS.get(self.status, ())

    def __repr__(self):
        return f"<Reservation {self.id} apt={self.apartment_id} {self.status}>"
