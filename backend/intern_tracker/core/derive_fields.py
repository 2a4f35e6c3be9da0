"""Derived Fields — read-only view fields computed from a stored intern record.

Invariants:
    - Pure: returns a new dict, the stored record is never mutated
    - Derived fields are recomputed on every read and never persisted
    - progressPercentage is always an int in 0..100
    - daysSinceStart is present only when startDate is, and never negative

Design Decisions:
    - now passed in, not read from the clock: deterministic tests, and one
      request decorates every record against the same instant
    - Half-up rounding so 12.5% shows as 13%, matching what a browser's Math.round shows
"""

import math
from datetime import datetime

from intern_tracker.core.timestamps import as_utc, midnight_utc
from intern_tracker.core.validate_intern import parse_iso_date

SECONDS_PER_DAY = 86_400


def decorate_intern(record: dict, now: datetime) -> dict:
    """Record plus fullName, daysSinceStart and progressPercentage."""
    view = dict(record)
    view["fullName"] = f"{record.get('firstName', '')} {record.get('lastName', '')}".strip()

    now = as_utc(now)
    start = parse_iso_date(record.get("startDate"))
    end = parse_iso_date(record.get("endDate"))

    view.pop("daysSinceStart", None)
    if start is not None:
        view["daysSinceStart"] = compute_days_since_start(midnight_utc(start), now)
    view["progressPercentage"] = (
        compute_progress(midnight_utc(start), midnight_utc(end), now)
        if start is not None and end is not None else 0
    )
    return view


def compute_days_since_start(start: datetime, now: datetime) -> int:
    elapsed = (now - start).total_seconds()
    return max(0, math.floor(elapsed / SECONDS_PER_DAY))


def compute_progress(start: datetime, end: datetime, now: datetime) -> int:
    total = (end - start).total_seconds()
    elapsed = (now - start).total_seconds()
    if total <= 0:
        return 100 if elapsed >= 0 else 0
    return _clamp(_round_half_up(100 * elapsed / total), 0, 100)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
