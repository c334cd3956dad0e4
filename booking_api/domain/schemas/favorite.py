"""Pydantic schemas for Favorite domain."""

from typing import Optional

from pydantic import BaseModel

from booking_api.domain.schemas.apartment import ApartmentRead
from booking_api.domain.schemas.common import UTCDateTime


class FavoriteCreate(BaseModel):
    apartment_id: int


class FavoriteRead(BaseModel):
    id: int
    user_id: int
    apartment_id: int
    created_at: Optional[UTCDateTime] = None
    apartment: Optional[ApartmentRead] = None


class FavoriteCheck(BaseModel):
    is_favorite: bool
    favorite_id: Optional[int] = None
