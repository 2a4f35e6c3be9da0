"""Intern Validation — field rules for create and update payloads.

Invariants:
    - All functions are PURE: no IO, no store access, no side effects
    - Every violated rule yields one {field, message} entry; nothing short-circuits
    - Empty list means the candidate is valid
    - Uniqueness (email) is NOT checked here: it needs store state (see services/)

Design Decisions:
    - Violations as plain dicts over exceptions: the caller decides whether to raise,
      and the list goes straight into the error envelope's details
    - existing record passed for update so the date-order rule can compare a patched
      startDate against a stored endDate (and vice versa)
"""

import math
from datetime import date, datetime
from typing import Any

from intern_tracker.core.domain_types import (
    Department, InternStatus, ValidationMode,
    EMAIL_PATTERN, GPA_MAX, GPA_MIN, LIST_FIELDS, MIN_NAME_LENGTH, REQUIRED_ON_CREATE,
)

_DEPARTMENTS = [d.value for d in Department]
_STATUSES = [s.value for s in InternStatus]


def validate_intern(
    candidate: dict[str, Any],
    mode: ValidationMode = ValidationMode.CREATE,
    existing: dict[str, Any] | None = None,
) -> list[dict]:
    """Return every rule the candidate violates."""
    violations: list[dict] = []

    if mode == ValidationMode.CREATE:
        for name in REQUIRED_ON_CREATE:
            if candidate.get(name) in (None, ""):
                violations.append(_violation(name, f"{name} is required"))

    for name in ("firstName", "lastName"):
        if candidate.get(name) not in (None, ""):
            _append(violations, check_name(name, candidate[name]))
    if candidate.get("email") not in (None, ""):
        _append(violations, check_email(candidate["email"]))
    if "department" in candidate and candidate["department"] not in (None, ""):
        _append(violations, check_enum("department", candidate["department"], _DEPARTMENTS))
    if "status" in candidate and candidate["status"] is not None:
        _append(violations, check_enum("status", candidate["status"], _STATUSES))
    if "gpa" in candidate and candidate["gpa"] is not None:
        _append(violations, check_gpa(candidate["gpa"]))
    for name in LIST_FIELDS:
        if name in candidate and candidate[name] is not None:
            _append(violations, check_string_list(name, candidate[name]))
    for name in ("phone", "university", "notes"):
        if name in candidate and candidate[name] is not None and not isinstance(candidate[name], str):
            violations.append(_violation(name, f"{name} must be a string"))

    violations.extend(check_date_range(candidate, existing or {}))
    return violations


# --- Single-field rules -------------------------------------------------------

def check_name(field_name: str, value: Any) -> dict | None:
    if not isinstance(value, str) or len(value.strip()) < MIN_NAME_LENGTH:
        return _violation(
            field_name, f"{field_name} must be at least {MIN_NAME_LENGTH} characters",
        )
    return None


def check_email(value: Any) -> dict | None:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        return _violation("email", "email must be a valid email address")
    return None


def check_enum(field_name: str, value: Any, allowed: list[str]) -> dict | None:
    if value not in allowed:
        return _violation(
            field_name, f"{field_name} must be one of: {', '.join(allowed)}",
        )
    return None


def check_gpa(value: Any) -> dict | None:
    # bool is an int subclass; a checkbox value is not a GPA
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _violation("gpa", "gpa must be a number")
    # only floats can be NaN; huge ints overflow float()
    if isinstance(value, float) and math.isnan(value):
        return _violation("gpa", "gpa must be a number")
    if not GPA_MIN <= value <= GPA_MAX:
        return _violation("gpa", f"gpa must be between {GPA_MIN} and {GPA_MAX}")
    return None


def check_string_list(field_name: str, value: Any) -> dict | None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return _violation(field_name, f"{field_name} must be a list of strings")
    return None


def parse_iso_date(value: Any) -> date | None:
    """ISO date (or the date part of an ISO timestamp), else None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def check_date_range(candidate: dict[str, Any], existing: dict[str, Any]) -> list[dict]:
    """Both dates well-formed; endDate not before startDate."""
    violations = []
    parsed: dict[str, date | None] = {}
    for name in ("startDate", "endDate"):
        if candidate.get(name) is not None:
            parsed[name] = parse_iso_date(candidate[name])
            if parsed[name] is None:
                violations.append(
                    _violation(name, f"{name} must be a valid date (YYYY-MM-DD)"),
                )
        else:
            parsed[name] = parse_iso_date(existing.get(name))
    if violations:
        return violations

    start, end = parsed["startDate"], parsed["endDate"]
    touched = "startDate" in candidate or "endDate" in candidate
    if touched and start and end and end < start:
        violations.append(_violation("endDate", "endDate must not be before startDate"))
    return violations


# --- Helpers ------------------------------------------------------------------

def _violation(field_name: str, message: str) -> dict:
    return {"field": field_name, "message": message}


def _append(violations: list[dict], violation: dict | None) -> None:
    if violation is not None:
        violations.append(violation)
