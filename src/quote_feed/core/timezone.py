"""Timezone utilities for quote timestamps."""

from datetime import datetime

import pytz

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive datetimes are assumed to already be UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def to_iso(dt: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC instant, e.g. 2024-06-15T20:00:00Z."""
    return to_utc(dt).isoformat().replace("+00:00", "Z")
