"""View Models — payload dicts to presentation dataclasses."""

from intern_tracker.core.errors import (
    ConflictError, NotFoundError, PreconditionError, StoreError, ValidationError,
)
from intern_tracker.web.view_models import (
    NOT_AVAILABLE, build_filter_notification, build_filter_view, build_intern_detail,
    build_intern_form, build_intern_rows, build_metric_cards, format_change,
    format_long_date, notification_for_error, status_css_class,
)


def _stats(**growth) -> dict:
    return {
        "metrics": {
            "totalInterns": 5, "activeApplications": 2,
            "interviewsScheduled": 3, "hiredThisMonth": 1,
        },
        "trends": {"growth": {"hiredChange": 0, "applicationsChange": 0, **growth}},
    }


def test_metric_cards_in_dashboard_order():
    cards = build_metric_cards(_stats(hiredChange=2, applicationsChange=-1))
    assert [c.key for c in cards] == [
        "total-interns", "active-applications", "interviews-scheduled", "hired-this-month",
    ]
    assert [c.value for c in cards] == [5, 2, 3, 1]
    assert cards[0].change_text == "+2 hired vs last month"
    assert cards[0].indicator == "▲"
    assert cards[1].change_kind == "negative"
    assert cards[1].indicator == "▼"
    assert cards[2].change_kind == "neutral"


def test_metric_cards_tolerate_missing_sections():
    cards = build_metric_cards({})
    assert [c.value for c in cards] == [0, 0, 0, 0]


def test_rows_use_placeholders():
    rows = build_intern_rows([{
        "id": "INT-004", "firstName": "David", "lastName": "Kim",
        "email": "david.kim@company.com", "status": "Pending", "department": "Marketing",
    }])
    assert rows[0].name == "David Kim"
    assert rows[0].status_class == "status-pending"
    assert rows[0].start_date == NOT_AVAILABLE
    assert rows[0].phone == NOT_AVAILABLE


def test_detail_formats_values():
    detail = build_intern_detail({
        "id": "INT-001", "fullName": "Sarah Johnson", "email": "s@x.io",
        "department": "Engineering", "status": "Active", "gpa": 3.9,
        "startDate": "2024-01-15", "progressPercentage": 60, "daysSinceStart": 91,
        "skills": ["Python", "React"],
    })
    items = {item.label: item for item in detail.items}
    assert items["GPA"].value == "3.90"
    assert items["Start Date"].value == "January 15, 2024"
    assert items["End Date"].value == NOT_AVAILABLE
    assert items["Progress"].value == "60% complete (91 days since start)"
    assert items["Skills"].value == "Python, React"
    assert items["Projects"].value == NOT_AVAILABLE
    assert items["Notes"].value == "No notes available"
    assert items["Status"].status_class == "status-active"
    assert detail.deletable is False


def test_detail_deletable_unless_active():
    detail = build_intern_detail({"id": "INT-003", "status": "Completed"})
    assert detail.deletable is True


def test_form_values_are_strings():
    form = build_intern_form({"id": "INT-001", "gpa": 3.5, "skills": ["SQL", "Go"]})
    assert form.intern_id == "INT-001"
    assert form.values["gpa"] == "3.5"
    assert form.values["skills"] == "SQL, Go"
    assert form.values["notes"] == ""
    assert build_intern_form().intern_id is None


def test_filter_notification():
    none_active = build_filter_view(None, None, None, None)
    assert none_active.active is False
    assert build_filter_notification(3, none_active) is None
    assert build_filter_notification(0, none_active).level == "info"

    filtered = build_filter_view("john", None, None, None)
    note = build_filter_notification(2, filtered)
    assert note.message == "Found 2 intern(s) matching your filters."
    assert note.level == "success"


def test_notification_for_errors():
    violations = [{"field": "email", "message": "email is required"}]
    note = notification_for_error(ValidationError(violations), "create")
    assert note.level == "error"
    assert "email is required" in note.message

    assert "already exists" in notification_for_error(ConflictError("x", "email"), "create").message
    assert notification_for_error(PreconditionError("Cannot delete active intern"), "delete").level == "warning"
    assert notification_for_error(NotFoundError("Intern", "INT-9"), "load").message == "Intern 'INT-9' not found"
    assert notification_for_error(StoreError("x", "write"), "update").message == (
        "Failed to update intern. Please try again."
    )


def test_formatting_helpers():
    assert status_css_class(None) == "status-unknown"
    assert format_change(3) == "+3"
    assert format_change(-2) == "-2"
    assert format_change(0) == "0"
    assert format_long_date("not a date") == "not a date"
    assert format_long_date(None) == NOT_AVAILABLE
