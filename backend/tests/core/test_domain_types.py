"""Domain Types — enum values and field tables the rest of the package relies on."""

from intern_tracker.core.domain_types import (
    Department, InternStatus, HIRED_STATUSES, INTERN_ID_PATTERN,
    LIST_FIELDS, REQUIRED_ON_CREATE, SORTABLE_FIELDS, WRITABLE_FIELDS,
)


def test_departments():
    assert {d.value for d in Department} == {
        "Engineering", "Data Science", "Design", "Marketing", "Finance", "HR", "Operations",
    }


def test_statuses():
    assert [s.value for s in InternStatus] == ["Pending", "Active", "Completed"]


def test_hired_means_active_or_completed():
    assert set(HIRED_STATUSES) == {"Active", "Completed"}


def test_required_fields_are_writable():
    assert set(REQUIRED_ON_CREATE) <= set(WRITABLE_FIELDS)
    assert set(LIST_FIELDS) <= set(WRITABLE_FIELDS)


def test_store_owned_fields_are_not_writable():
    for name in ("id", "createdAt", "statusChangedAt", "fullName"):
        assert name not in WRITABLE_FIELDS


def test_id_pattern():
    assert INTERN_ID_PATTERN.match("INT-001")
    assert INTERN_ID_PATTERN.match("INT-1234")
    assert not INTERN_ID_PATTERN.match("INT-01")
    assert not INTERN_ID_PATTERN.match("int-001")


def test_id_is_sortable():
    assert "id" in SORTABLE_FIELDS
