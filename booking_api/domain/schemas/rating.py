"""Pydantic schemas for Rating and Comment."""

from typing import Optional

from pydantic import BaseModel, Field

from booking_api.domain.schemas.common import UTCDateTime


class RatingCreate(BaseModel):
    apartment_id: int
    reservation_id: int
    value: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, min_length=1, max_length=1000)


class DirectRatingCreate(BaseModel):
    apartment_id: int
    value: int = Field(ge=1, le=5)
    comment_text: Optional[str] = Field(default=None, min_length=1, max_length=1000)


class RatingUpdate(BaseModel):
    value: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, min_length=1, max_length=1000)


class RatingRead(BaseModel):
    id: int
    user_id: int
    apartment_id: int
    reservation_id: Optional[int] = None
    value: int
    comment_id: Optional[int] = None
    comment: Optional[str] = None
    user_name: Optional[str] = None
    created_at: Optional[UTCDateTime] = None


class RatingDistribution(BaseModel):
    five_star: int = 0
    four_star: int = 0
    three_star: int = 0
    two_star: int = 0
    one_star: int = 0


class RatingSummary(BaseModel):
    apartment_id: int
    average_rating: float
    total_ratings: int
    rating_distribution: RatingDistribution
