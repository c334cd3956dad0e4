"""Time helpers. Everything is stored and compared as naive UTC."""

from datetime import datetime, timezone

import pytz

from booking_api.config import get_settings

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive input is read in TIMEZONE."""
    if value.tzinfo is None:
        value = tz.localize(value)
    return value.astimezone(pytz.utc).replace(tzinfo=None)
