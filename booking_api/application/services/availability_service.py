"""Availability service — date-range validation and conflict detection."""

from datetime import datetime
from typing import Optional, Tuple

from booking_api.core.clock import to_utc, utcnow
from booking_api.core.exceptions import NotFoundError, ValidationError
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository


def validate_range(
    start_time: datetime, end_time: datetime, now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """Normalize both bounds to naive UTC and check start < end with start in the future."""
    start, end = to_utc(start_time), to_utc(end_time)
    now = now or utcnow()
    if start <= now:
        raise ValidationError("Start time must be in the future", field="start_time")
    if end <= start:
        raise ValidationError("End time must be after start time", field="end_time")
    return start, end


def intervals_overlap(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """Half-open [start, end) overlap; touching ranges do not overlap."""
    return start_a < end_b and end_a > start_b


def is_available(
    reservations: ReservationRepository,
    apartments: ApartmentRepository,
    apartment_id: int,
    start_time: datetime,
    end_time: datetime,
    now: Optional[datetime] = None,
) -> bool:
    """True when no pending or confirmed reservation overlaps the range."""
    if apartments.get_by_id(apartment_id) is None:
        raise NotFoundError("Apartment", apartment_id)
    start, end = validate_range(start_time, end_time, now)
    return not reservations.find_conflicts(apartment_id, start, end)
