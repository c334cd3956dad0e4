"""Rating domain model — reservation-linked or direct."""

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base

MIN_RATING = 1
MAX_RATING = 5


class Rating(Base):
    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    apartment_id = Column(Integer, ForeignKey("apartments.id"), nullable=False, index=True)
    value = Column(Integer, nullable=False)
    # Reservation path: one rating per reservation
    reservation_id = Column(Integer, ForeignKey("reservations.id"), nullable=True, unique=True)
    comment_id = Column(Integer, ForeignKey("comments.id"), nullable=True)
    # Direct path keeps its text inline
    comment_text = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    comment = relationship("Comment")
    user = relationship("User")

    __table_args__ = (
        CheckConstraint(f"value >= {MIN_RATING} AND value <= {MAX_RATING}", name="ck_ratings_value_range"),
        # Direct path: one rating per (user, apartment)
        Index(
            "uq_ratings_direct_user_apartment",
            "user_id",
            "apartment_id",
            unique=True,
            postgresql_where=reservation_id.is_(None),
            sqlite_where=reservation_id.is_(None),
        ),
    )

    @property
    def is_direct(self) -> bool:
        return self.reservation_id is None

    def __repr__(self):
        return f"<Rating {self.id} apt={self.apartment_id} value={self.value}>"
