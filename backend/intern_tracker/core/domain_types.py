"""Domain Types — enums, identity types and limits shared across the codebase.

Invariants:
    - InternId values always match INTERN_ID_PATTERN (INT- followed by >= 3 digits)
    - Department and InternStatus are the only valid values for their fields
    - GPA is bounded 0.0–4.0

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal
      to the raw strings stored in the JSON document
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InternId = NewType("InternId", str)

INTERN_ID_PREFIX = "INT-"
INTERN_ID_WIDTH = 3
INTERN_ID_PATTERN = re.compile(r"^INT-(\d{3,})$")


# ─── Enums ───────────────────────────────────────────────────────

class Department(str, Enum):
    """Departments an intern can be placed in."""
    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
    DESIGN = "Design"
    DATA_SCIENCE = "Data Science"
    HR = "HR"
    FINANCE = "Finance"
    OPERATIONS = "Operations"


class InternStatus(str, Enum):
    """Intern lifecycle states. Transitions are unconstrained."""
    PENDING = "Pending"
    ACTIVE = "Active"
    COMPLETED = "Completed"


class ValidationMode(str, Enum):
    """Create requires the mandatory fields; update checks only what is supplied."""
    CREATE = "create"
    UPDATE = "update"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


HIRED_STATUSES = frozenset({InternStatus.ACTIVE.value, InternStatus.COMPLETED.value})


# ─── Limits ──────────────────────────────────────────────────────

MIN_NAME_LENGTH = 2
GPA_MIN = 0.0
GPA_MAX = 4.0
MAX_PAGE_SIZE = 100
TOP_SKILLS_LIMIT = 5

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_ON_CREATE = ("firstName", "lastName", "email", "department")

# Fields a client may write. id, createdAt and statusChangedAt belong to the store.
WRITABLE_FIELDS = (
    "firstName", "lastName", "email", "phone", "department", "status",
    "startDate", "endDate", "university", "gpa", "skills", "projects", "notes",
)
LIST_FIELDS = ("skills", "projects")
SORTABLE_FIELDS = (
    "id", "firstName", "lastName", "email", "department", "status",
    "startDate", "endDate", "gpa", "createdAt",
)
