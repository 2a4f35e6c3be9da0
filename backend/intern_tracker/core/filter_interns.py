"""Intern Listing — filtering, sorting and pagination over record dicts.

Invariants:
    - Pure: inputs are never mutated; sorting is stable
    - Filters combine by conjunction; an absent filter matches everything
    - Records missing the sort field always sort last, whatever the order
    - Unknown sort fields, orders, or page bounds raise InvalidInputError
"""

import math
from datetime import datetime, timezone
from typing import Any

from intern_tracker.core.domain_types import MAX_PAGE_SIZE, SORTABLE_FIELDS, SortOrder
from intern_tracker.core.errors import InvalidInputError
from intern_tracker.core.intern_ids import parse_sequence
from intern_tracker.core.timestamps import parse_timestamp

_TIMESTAMP_FIELDS = {"createdAt", "statusChangedAt"}
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def matches_search(record: dict, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    haystack = (record.get("firstName"), record.get("lastName"), record.get("email"))
    return any(needle in value.lower() for value in haystack if isinstance(value, str))


def filter_interns(
    records: list[dict],
    search: str | None = None,
    status: str | None = None,
    department: str | None = None,
) -> list[dict]:
    """Records matching every supplied filter."""
    return [
        r for r in records
        if (not search or matches_search(r, search))
        and (not status or r.get("status") == status)
        and (not department or r.get("department") == department)
    ]


def sort_interns(
    records: list[dict], sort_by: str | None = None, order: str | None = None,
) -> list[dict]:
    """Sorted copy. No sort_by keeps insertion order."""
    if order is not None and order not in {o.value for o in SortOrder}:
        raise InvalidInputError(f"order must be 'asc' or 'desc', got '{order}'", "order")
    if not sort_by:
        return list(records)
    if sort_by not in SORTABLE_FIELDS:
        raise InvalidInputError(
            f"Cannot sort by '{sort_by}'. Allowed: {', '.join(SORTABLE_FIELDS)}", "sortBy",
        )
    present = [r for r in records if r.get(sort_by) is not None]
    missing = [r for r in records if r.get(sort_by) is None]
    present.sort(
        key=lambda r: _sort_key(sort_by, r[sort_by]),
        reverse=order == SortOrder.DESC.value,
    )
    return present + missing


def paginate(
    records: list[dict], page: int | None = None, limit: int | None = None,
) -> tuple[list[dict], dict]:
    """Slice for the requested page and its metadata."""
    total = len(records)
    if page is None and limit is None:
        return list(records), {"total": total, "page": None, "limit": None, "totalPages": 1}

    page = 1 if page is None else page
    limit = MAX_PAGE_SIZE if limit is None else limit
    if page < 1:
        raise InvalidInputError("page must be >= 1", "page")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise InvalidInputError(f"limit must be between 1 and {MAX_PAGE_SIZE}", "limit")

    start = (page - 1) * limit
    total_pages = max(1, math.ceil(total / limit))
    return records[start:start + limit], {
        "total": total, "page": page, "limit": limit, "totalPages": total_pages,
    }


def _sort_key(field_name: str, value: Any) -> Any:
    if field_name == "id":
        return parse_sequence(value) or 0
    if field_name in _TIMESTAMP_FIELDS:
        # ISO strings with and without fractional seconds do not sort as text
        return parse_timestamp(value) or _EARLIEST
    # case-insensitive for names and emails
    return value.lower() if isinstance(value, str) else value
