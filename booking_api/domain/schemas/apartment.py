"""Pydantic schemas for Apartment domain."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from booking_api.domain.schemas.common import UTCDateTime


class ApartmentBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=100)
    price: float = Field(ge=0)
    capacity: int = Field(ge=1)
    amenities: Optional[str] = None
    images: Optional[str] = None


class ApartmentCreate(ApartmentBase):
    pass


class ApartmentUpdate(BaseModel):
    """Partial update; omitted fields stay unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[float] = Field(default=None, ge=0)
    capacity: Optional[int] = Field(default=None, ge=1)
    amenities: Optional[str] = None
    images: Optional[str] = None

    @field_validator("title", "price", "capacity")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class ApartmentRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    price: float
    capacity: int
    amenities: Optional[str] = None
    images: Optional[str] = None
    created_at: Optional[UTCDateTime] = None
    average_rating: float = 0.0
    review_count: int = 0

    model_config = {"from_attributes": True}


class ApartmentSummary(BaseModel):
    id: int
    title: str
    location: Optional[str] = None
    price: float

    model_config = {"from_attributes": True}


class ApartmentFilter(BaseModel):
    category: Optional[str] = None
    location: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    capacity: Optional[int] = None
    search: Optional[str] = None


class AvailabilityRead(BaseModel):
    apartment_id: int
    start_time: UTCDateTime
    end_time: UTCDateTime
    available: bool
