"""Favorite domain model — a user's bookmarked apartment."""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base


class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "apartment_id", name="uq_favorites_user_apartment"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    apartment_id = Column(Integer, ForeignKey("apartments.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    apartment = relationship("Apartment")

    def __repr__(self):
        return f"<Favorite user={self.user_id} apt={self.apartment_id}>"
