"""Pydantic schemas for the activity log."""

from typing import Optional

from pydantic import BaseModel

from booking_api.domain.schemas.common import UTCDateTime


class ActivityLogRead(BaseModel):
    id: int
    user_id: Optional[int] = None
    action: str
    entity_type: str
    entity_id: Optional[int] = None
    details: Optional[str] = None
    created_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}
