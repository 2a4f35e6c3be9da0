"""Timestamps — UTC helpers for stored ISO-8601 strings.

Invariants:
    - Stored timestamps are always timezone-aware UTC, serialized with isoformat()
    - Naive datetimes are interpreted as UTC
    - Dates are treated as midnight UTC when compared to timestamps
"""

from datetime import date, datetime, time, timezone
from typing import Any


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    return as_utc(moment).isoformat()


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Aware UTC datetime from an ISO string or datetime, else None."""
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str):
        return None
    try:
        return as_utc(datetime.fromisoformat(value))
    except ValueError:
        return None


def midnight_utc(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)
