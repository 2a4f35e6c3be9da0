"""Intern Service — create/read/list/update/delete over the record store.

Invariants:
    - Every read returns decorated records (derived fields computed against one now)
    - id and createdAt never change after create; statusChangedAt changes only with status
    - email is unique across the store (case-insensitive)
    - Malformed ids are rejected before any store access
    - Delete checks, in order: id format, existence, Active guard, confirmation flag

Design Decisions:
    - Clock injected (callable returning aware UTC datetime): deterministic tests
    - Uniqueness checked inside the same transaction that writes, so two concurrent
      creates with one email cannot both succeed
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from intern_tracker.core.derive_fields import decorate_intern
from intern_tracker.core.domain_types import InternStatus, ValidationMode
from intern_tracker.core.errors import (
    ConflictError, ErrorContext, InvalidInputError, NotFoundError,
    PreconditionError, ValidationError,
)
from intern_tracker.core.filter_interns import filter_interns, paginate, sort_interns
from intern_tracker.core.intern_ids import is_valid_intern_id
from intern_tracker.core.normalize_input import normalize_candidate
from intern_tracker.core.repository_protocols import InternRepository
from intern_tracker.core.timestamps import to_iso, utc_now
from intern_tracker.core.validate_intern import validate_intern
from intern_tracker.schemas.intern import to_document

logger = logging.getLogger(__name__)


class InternService:
    """CRUD operations on intern records."""

    def __init__(
        self, store: InternRepository, clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.clock = clock

    async def create(self, raw: dict[str, Any]) -> dict:
        """Validate, assign id and timestamps, persist, return decorated record."""
        candidate = normalize_candidate(raw)
        violations = validate_intern(candidate, ValidationMode.CREATE)
        if violations:
            raise ValidationError(violations)

        now = self.clock()
        async with self.store.transaction() as records:
            _ensure_email_available(records, candidate["email"])
            stamp = to_iso(now)
            record = to_document({
                **candidate,
                "id": self.store.allocate_id(records),
                "status": candidate.get("status", InternStatus.PENDING.value),
                "createdAt": stamp,
                "statusChangedAt": stamp,
            })
            records.append(record)

        logger.info(f"Intern {record['id']} created", extra={"intern_id": record["id"]})
        return decorate_intern(record, now)

    async def get(self, intern_id: str) -> dict:
        _ensure_valid_id(intern_id)
        records = await self.store.load_all()
        return decorate_intern(_find(records, intern_id), self.clock())

    async def list_interns(
        self,
        search: str | None = None,
        status: str | None = None,
        department: str | None = None,
        sort_by: str | None = None,
        order: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> dict:
        """Filtered, sorted, optionally paged records with the filters echoed back."""
        records = await self.store.load_all()
        matched = filter_interns(records, search, status, department)
        ordered = sort_interns(matched, sort_by, order)
        page_records, pagination = paginate(ordered, page, limit)

        now = self.clock()
        filters = {
            key: value for key, value in (
                ("search", search), ("status", status), ("department", department),
                ("sortBy", sort_by), ("order", order),
            ) if value
        }
        return {
            "data": [decorate_intern(r, now) for r in page_records],
            "filters": filters,
            "pagination": pagination,
        }

    async def update(
        self, intern_id: str, raw_patch: dict[str, Any],
    ) -> tuple[dict, list[str]]:
        """Apply supplied, non-empty fields. Returns (decorated, changed field names)."""
        _ensure_valid_id(intern_id)
        patch = normalize_candidate(raw_patch)

        now = self.clock()
        async with self.store.transaction() as records:
            index, current = _find_with_index(records, intern_id)
            violations = validate_intern(patch, ValidationMode.UPDATE, existing=current)
            if violations:
                raise ValidationError(violations, ErrorContext(intern_id=intern_id))
            if "email" in patch and patch["email"].lower() != current["email"].lower():
                _ensure_email_available(records, patch["email"], exclude_id=intern_id)

            merged = to_document({**current, **patch})
            changed = [name for name in patch if merged.get(name) != current.get(name)]
            if "status" in changed:
                merged["statusChangedAt"] = to_iso(now)
            records[index] = merged

        logger.info(
            f"Intern {intern_id} updated: {', '.join(changed) or 'no changes'}",
            extra={"intern_id": intern_id},
        )
        return decorate_intern(merged, now), changed

    async def delete(self, intern_id: str, confirm: bool = False) -> str:
        """Remove the record. Returns the deletion timestamp."""
        _ensure_valid_id(intern_id)
        async with self.store.transaction() as records:
            index, current = _find_with_index(records, intern_id)
            if current.get("status") == InternStatus.ACTIVE.value:
                raise PreconditionError(
                    "Cannot delete active intern", ErrorContext(intern_id=intern_id),
                )
            if confirm is not True:
                raise InvalidInputError(
                    "Deletion requires confirmation. Add ?confirm=true to the request.",
                    "confirm", ErrorContext(intern_id=intern_id),
                )
            del records[index]

        deleted_at = to_iso(self.clock())
        logger.info(f"Intern {intern_id} deleted", extra={"intern_id": intern_id})
        return deleted_at


# --- Helpers ------------------------------------------------------------------

def _ensure_valid_id(intern_id: str) -> None:
    if not is_valid_intern_id(intern_id):
        raise InvalidInputError(
            f"Invalid intern ID format '{intern_id}'. Expected INT-NNN.", "id",
        )


def _find(records: list[dict], intern_id: str) -> dict:
    return _find_with_index(records, intern_id)[1]


def _find_with_index(records: list[dict], intern_id: str) -> tuple[int, dict]:
    for index, record in enumerate(records):
        if record.get("id") == intern_id:
            return index, record
    raise NotFoundError("Intern", intern_id)


def _ensure_email_available(
    records: list[dict], email: str, exclude_id: str | None = None,
) -> None:
    wanted = email.lower()
    for record in records:
        if record.get("id") != exclude_id and str(record.get("email", "")).lower() == wanted:
            raise ConflictError(
                f"An intern with email '{email}' already exists", "email",
                ErrorContext(intern_id=record.get("id")),
            )
