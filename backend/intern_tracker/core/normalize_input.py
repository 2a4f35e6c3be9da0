"""Input Normalization — turns raw JSON or form payloads into validator-ready dicts.

Invariants:
    - Pure: returns a new dict, never mutates the input
    - Only WRITABLE_FIELDS survive; store-owned fields (id, createdAt, statusChangedAt) are dropped
    - None, empty and whitespace-only strings mean "not supplied" and are dropped

Design Decisions:
    - Coercion is lenient (numeric strings become floats, comma strings become lists)
      because browser forms submit everything as text; anything that cannot be
      coerced is passed through unchanged so the validator can report it
"""

from typing import Any

from intern_tracker.core.domain_types import LIST_FIELDS, WRITABLE_FIELDS


def normalize_candidate(raw: dict[str, Any]) -> dict[str, Any]:
    """Keep supplied, writable fields with light type coercion."""
    candidate: dict[str, Any] = {}
    for name in WRITABLE_FIELDS:
        if name not in raw:
            continue
        value = _clean(raw[name])
        if value is None:
            continue
        if name == "gpa":
            value = _coerce_number(value)
        elif name in LIST_FIELDS:
            value = _coerce_list(value)
        candidate[name] = value
    return candidate


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _coerce_number(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _coerce_list(value: Any) -> Any:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, list):
        return [v.strip() if isinstance(v, str) else v for v in value]
    return value
