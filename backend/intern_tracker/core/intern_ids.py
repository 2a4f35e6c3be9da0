"""Intern Ids — parsing and formatting of INT-NNN identifiers.

Invariants:
    - format_intern_id(n) zero-pads to INTERN_ID_WIDTH and never truncates
    - parse_sequence returns None for anything that is not a well-formed id
"""

from collections.abc import Iterable

from intern_tracker.core.domain_types import (
    INTERN_ID_PATTERN, INTERN_ID_PREFIX, INTERN_ID_WIDTH, InternId,
)


def is_valid_intern_id(value: object) -> bool:
    return isinstance(value, str) and INTERN_ID_PATTERN.match(value) is not None


def parse_sequence(value: object) -> int | None:
    """Numeric suffix of a well-formed id, else None."""
    if not isinstance(value, str):
        return None
    match = INTERN_ID_PATTERN.match(value)
    return int(match.group(1)) if match else None


def format_intern_id(sequence: int) -> InternId:
    if sequence < 1:
        raise ValueError(f"Intern id sequence must be positive, got {sequence}")
    return InternId(f"{INTERN_ID_PREFIX}{sequence:0{INTERN_ID_WIDTH}d}")


def highest_sequence(records: Iterable[dict]) -> int:
    """Largest numeric suffix among records (0 when there are none)."""
    sequences = (parse_sequence(r.get("id")) for r in records)
    return max((s for s in sequences if s is not None), default=0)
