"""Pydantic schemas for Payment domain."""

from typing import Optional

from pydantic import BaseModel, Field

from booking_api.domain.schemas.common import UTCDateTime


class PaymentCreate(BaseModel):
    reservation_id: int
    amount: float = Field(ge=0)
    payment_method: str = Field(min_length=1, max_length=50)


class PaymentProcessRequest(BaseModel):
    reservation_id: int


class PaymentRead(BaseModel):
    id: int
    reservation_id: int
    user_id: int
    apartment_id: int
    amount: float
    payment_method: str
    status: str
    created_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}


class PaymentResult(BaseModel):
    message: str
    payment: PaymentRead
    reservation_status: str
