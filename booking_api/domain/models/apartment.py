"""Apartment domain model — maps to the 'apartments' table."""

from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base
from booking_api.domain.models.mixins import SoftDeleteMixin


class Apartment(SoftDeleteMixin, Base):
    __tablename__ = "apartments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=True, index=True)
    category = Column(String(100), nullable=True, index=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False, index=True)
    capacity = Column(Integer, nullable=False, default=1)
    amenities = Column(Text, nullable=True)
    images = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    def __repr__(self):
        return f"<Apartment {self.id} - {self.title}>"
