"""UTC time helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_timestamp(value: datetime | int) -> int:
    """Return whole Unix seconds for a datetime (naive means UTC) or an int."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return math.floor(value.timestamp())
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"cannot convert {type(value).__name__} to a Unix timestamp")


def from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value, timezone.utc)
