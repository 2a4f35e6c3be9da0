"""Intern Schemas — the persisted record model.

Invariants:
    - InternRecord round-trips the JSON document: load validates, dump uses camelCase
    - Absent optional fields are omitted from the stored form, never written as null
    - Dates are stored as YYYY-MM-DD even when supplied as full ISO timestamps
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from intern_tracker.core.domain_types import Department, InternStatus
from intern_tracker.core.validate_intern import parse_iso_date


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InternRecord(_CamelModel):
    """One intern as stored in the JSON document."""
    id: str = Field(pattern=r"^INT-\d{3,}$")
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    department: Department
    status: InternStatus = InternStatus.PENDING
    start_date: date | None = None
    end_date: date | None = None
    university: str | None = None
    gpa: float | None = Field(None, ge=0.0, le=4.0)
    skills: list[str] | None = None
    projects: list[str] | None = None
    notes: str | None = None
    created_at: datetime
    status_changed_at: datetime | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def date_part_only(cls, v: Any) -> Any:
        # "2024-01-15T10:00:00Z" keeps its calendar date
        return parse_iso_date(v) or v

    def to_document(self) -> dict[str, Any]:
        """camelCase, JSON-native dict as written to disk."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def to_document(record: dict[str, Any]) -> dict[str, Any]:
    """Validate a record dict against InternRecord and return its stored form."""
    return InternRecord.model_validate(record).to_document()
