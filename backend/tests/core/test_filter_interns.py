"""Listing tests — search, filters, sorting and pagination over record dicts."""

import pytest

from intern_tracker.core.errors import InvalidInputError
from intern_tracker.core.filter_interns import filter_interns, paginate, sort_interns
from tests.factories import make_record


@pytest.fixture
def records() -> list[dict]:
    return [
        make_record(id="INT-001", firstName="Sarah", lastName="Johnson",
                    email="sarah.johnson@company.com", status="Active", gpa=3.9),
        make_record(id="INT-002", firstName="Michael", lastName="Chen",
                    email="michael.chen@company.com", department="Data Science", gpa=3.85),
        make_record(id="INT-003", firstName="Emily", lastName="Rodriguez",
                    email="emily@company.com", department="Design", status="Completed"),
        make_record(id="INT-010", firstName="Johnny", lastName="Appleseed",
                    email="ja@company.com"),
    ]


def _ids(records: list[dict]) -> list[str]:
    return [r["id"] for r in records]


# --- Filtering ----------------------------------------------------------------

def test_search_matches_names_and_email_case_insensitively(records):
    assert _ids(filter_interns(records, search="john")) == ["INT-001", "INT-010"]
    assert _ids(filter_interns(records, search="JOHN")) == ["INT-001", "INT-010"]


def test_search_matches_email(records):
    assert _ids(filter_interns(records, search="michael.chen@")) == ["INT-002"]


def test_filters_combine_by_conjunction(records):
    result = filter_interns(records, search="o", status="Pending", department="Engineering")
    assert _ids(result) == ["INT-010"]


def test_no_filters_returns_everything_in_order(records):
    assert _ids(filter_interns(records)) == ["INT-001", "INT-002", "INT-003", "INT-010"]


# --- Sorting ------------------------------------------------------------------

def test_default_sort_keeps_insertion_order(records):
    assert _ids(sort_interns(list(reversed(records)))) == ["INT-010", "INT-003", "INT-002", "INT-001"]


def test_sort_by_first_name(records):
    assert _ids(sort_interns(records, "firstName")) == ["INT-003", "INT-010", "INT-002", "INT-001"]


def test_missing_values_sort_last_in_both_orders(records):
    assert _ids(sort_interns(records, "gpa"))[:2] == ["INT-002", "INT-001"]
    assert _ids(sort_interns(records, "gpa", "desc"))[:2] == ["INT-001", "INT-002"]
    assert set(_ids(sort_interns(records, "gpa", "desc"))[2:]) == {"INT-003", "INT-010"}


def test_sort_by_id_is_numeric():
    records = [make_record(id="INT-1000"), make_record(id="INT-999")]
    assert _ids(sort_interns(records, "id")) == ["INT-999", "INT-1000"]


def test_sort_by_created_at_compares_instants():
    records = [
        make_record(id="INT-002", createdAt="2024-04-01T12:00:00.500000Z"),
        make_record(id="INT-001", createdAt="2024-04-01T12:00:00Z"),
        make_record(id="INT-003", createdAt="2024-04-01T13:00:00.250000+01:00"),
    ]
    assert _ids(sort_interns(records, "createdAt")) == ["INT-001", "INT-003", "INT-002"]
    assert _ids(sort_interns(records, "createdAt", "desc")) == ["INT-002", "INT-003", "INT-001"]


def test_unknown_sort_field_is_invalid_input(records):
    with pytest.raises(InvalidInputError) as exc:
        sort_interns(records, "password")
    assert exc.value.field_name == "sortBy"


def test_unknown_order_is_invalid_input(records):
    with pytest.raises(InvalidInputError):
        sort_interns(records, "firstName", "sideways")


# --- Pagination ---------------------------------------------------------------

def test_no_paging_returns_everything(records):
    page, meta = paginate(records)
    assert len(page) == 4
    assert meta == {"total": 4, "page": None, "limit": None, "totalPages": 1}


def test_second_page(records):
    page, meta = paginate(records, page=2, limit=3)
    assert _ids(page) == ["INT-010"]
    assert meta == {"total": 4, "page": 2, "limit": 3, "totalPages": 2}


def test_page_past_the_end_is_empty(records):
    page, meta = paginate(records, page=5, limit=2)
    assert page == []
    assert meta["totalPages"] == 2


def test_limit_out_of_range_is_invalid_input(records):
    with pytest.raises(InvalidInputError):
        paginate(records, page=1, limit=500)
