"""Pydantic schemas for Reservation domain."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from booking_api.domain.schemas.apartment import ApartmentSummary
from booking_api.domain.schemas.common import UTCDateTime


class ReservationCreate(BaseModel):
    apartment_id: int
    start_time: datetime
    end_time: datetime


class ReservationRead(BaseModel):
    id: int
    user_id: int
    apartment_id: int
    start_time: UTCDateTime
    end_time: UTCDateTime
    status: str
    created_at: Optional[UTCDateTime] = None
    apartment: Optional[ApartmentSummary] = None

    model_config = {"from_attributes": True}


class ReservationStatusUpdate(BaseModel):
    status: Literal["pending", "confirmed", "cancelled", "completed"]
