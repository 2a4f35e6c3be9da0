"""View Models — request-scoped presentation data built from API payloads.

Invariants:
    - Pure: payload dicts in, frozen dataclasses out; no IO, no service calls
    - Missing optional values render as "N/A" (or a specific placeholder), never "None"
    - Every error becomes a Notification; nothing is silently dropped

Design Decisions:
    - Frozen dataclasses over dicts: templates get attribute access and a fixed shape
    - Built fresh per request instead of cached page state, so an edit in another tab
      is visible on the next render
"""

from dataclasses import dataclass, field
from datetime import date

from intern_tracker.core.domain_types import Department, InternStatus
from intern_tracker.core.errors import InternTrackerError

NOT_AVAILABLE = "N/A"

NOTIFICATION_ICONS = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
}


@dataclass(frozen=True)
class MetricCard:
    key: str
    title: str
    value: int
    change_text: str
    change_kind: str
    icon: str

    @property
    def indicator(self) -> str:
        return {"positive": "▲", "negative": "▼"}.get(self.change_kind, "●")


@dataclass(frozen=True)
class InternRow:
    id: str
    name: str
    email: str
    status: str
    status_class: str
    department: str
    start_date: str
    phone: str


@dataclass(frozen=True)
class DetailItem:
    label: str
    value: str
    status_class: str | None = None


@dataclass(frozen=True)
class InternDetail:
    id: str
    full_name: str
    status: str
    items: list[DetailItem] = field(default_factory=list)
    deletable: bool = True


@dataclass(frozen=True)
class InternFormView:
    """Values for the create/edit form; intern_id None means create."""
    intern_id: str | None
    values: dict[str, str]
    departments: list[str]
    statuses: list[str]


@dataclass(frozen=True)
class FilterView:
    search: str
    status: str
    department: str
    sort_by: str
    departments: list[str]
    statuses: list[str]

    @property
    def active(self) -> bool:
        return bool(self.search or self.status or self.department)


@dataclass(frozen=True)
class Notification:
    message: str
    level: str = "info"

    @property
    def icon(self) -> str:
        return NOTIFICATION_ICONS.get(self.level, NOTIFICATION_ICONS["info"])


# --- Builders -----------------------------------------------------------------

def build_metric_cards(stats: dict) -> list[MetricCard]:
    """Four dashboard cards from a /api/dashboard/stats payload."""
    metrics = stats.get("metrics", {})
    growth = stats.get("trends", {}).get("growth", {})
    hired_change = growth.get("hiredChange", 0)
    applications_change = growth.get("applicationsChange", 0)
    return [
        MetricCard(
            "total-interns", "Total Interns", metrics.get("totalInterns", 0),
            f"{format_change(hired_change)} hired vs last month",
            _change_kind(hired_change), "👥",
        ),
        MetricCard(
            "active-applications", "Active Applications",
            metrics.get("activeApplications", 0),
            f"{format_change(applications_change)} this week",
            _change_kind(applications_change), "📋",
        ),
        MetricCard(
            "interviews-scheduled", "Interviews Scheduled",
            metrics.get("interviewsScheduled", 0), "This week", "neutral", "🗓️",
        ),
        MetricCard(
            "hired-this-month", "Hired This Month", metrics.get("hiredThisMonth", 0),
            f"{format_change(hired_change)} from last month",
            _change_kind(hired_change), "✅",
        ),
    ]


def build_intern_rows(interns: list[dict]) -> list[InternRow]:
    return [
        InternRow(
            id=intern["id"],
            name=intern.get("fullName") or _full_name(intern),
            email=intern.get("email", ""),
            status=intern.get("status", ""),
            status_class=status_css_class(intern.get("status")),
            department=intern.get("department", ""),
            start_date=intern.get("startDate") or NOT_AVAILABLE,
            phone=intern.get("phone") or NOT_AVAILABLE,
        )
        for intern in interns
    ]


def build_intern_detail(intern: dict) -> InternDetail:
    """Detail panel from a decorated intern payload."""
    status = intern.get("status", "")
    days = intern.get("daysSinceStart")
    progress = f"{intern.get('progressPercentage', 0)}% complete"
    if days is not None:
        progress += f" ({days} days since start)"
    gpa = intern.get("gpa")
    items = [
        DetailItem("Full Name", intern.get("fullName") or _full_name(intern)),
        DetailItem("Email Address", intern.get("email", "")),
        DetailItem("Phone Number", intern.get("phone") or NOT_AVAILABLE),
        DetailItem("Department", intern.get("department", "")),
        DetailItem("Status", status, status_css_class(status)),
        DetailItem("University", intern.get("university") or NOT_AVAILABLE),
        DetailItem("GPA", f"{gpa:.2f}" if gpa is not None else NOT_AVAILABLE),
        DetailItem("Start Date", format_long_date(intern.get("startDate"))),
        DetailItem("End Date", format_long_date(intern.get("endDate"))),
        DetailItem("Progress", progress),
        DetailItem("Skills", _join(intern.get("skills"))),
        DetailItem("Projects", _join(intern.get("projects"))),
        DetailItem("Notes", intern.get("notes") or "No notes available"),
    ]
    return InternDetail(
        id=intern["id"],
        full_name=intern.get("fullName") or _full_name(intern),
        status=status,
        items=items,
        deletable=status != InternStatus.ACTIVE.value,
    )


def build_intern_form(intern: dict | None = None) -> InternFormView:
    intern = intern or {}
    values = {
        name: _form_value(intern.get(name))
        for name in (
            "firstName", "lastName", "email", "phone", "department", "status",
            "startDate", "endDate", "university", "gpa", "skills", "projects", "notes",
        )
    }
    return InternFormView(
        intern_id=intern.get("id"),
        values=values,
        departments=[d.value for d in Department],
        statuses=[s.value for s in InternStatus],
    )


def build_filter_view(
    search: str | None, status: str | None, department: str | None, sort_by: str | None,
) -> FilterView:
    return FilterView(
        search=search or "",
        status=status or "",
        department=department or "",
        sort_by=sort_by or "",
        departments=[d.value for d in Department],
        statuses=[s.value for s in InternStatus],
    )


def build_filter_notification(count: int, filters: FilterView) -> Notification | None:
    """Result summary shown after filtering (None when nothing was filtered)."""
    if count == 0:
        return Notification("No interns found matching your filters.", "info")
    if filters.active:
        return Notification(f"Found {count} intern(s) matching your filters.", "success")
    return None


def notification_for_error(exc: InternTrackerError, action: str) -> Notification:
    """User-facing message for a failed action ("create", "update", "delete", "load")."""
    if exc.code == "VALIDATION_ERROR":
        problems = "; ".join(v["message"] for v in (exc.details or [])[:3])
        message = f"Please check your form data and try again. {problems}".strip()
        return Notification(message, "error")
    if exc.code == "CONFLICT":
        return Notification("An application with this email address already exists.", "error")
    if exc.code == "PRECONDITION_FAILED":
        return Notification(f"{exc.message}. Change the status first.", "warning")
    if exc.code in ("RESOURCE_NOT_FOUND", "INVALID_INPUT"):
        return Notification(exc.message, "error")
    return Notification(f"Failed to {action} intern. Please try again.", "error")


# --- Formatting helpers -------------------------------------------------------

def status_css_class(status: str | None) -> str:
    return f"status-{(status or 'unknown').lower()}"


def format_change(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def format_long_date(value: str | None) -> str:
    """'2024-01-15' -> 'January 15, 2024'."""
    if not value:
        return NOT_AVAILABLE
    try:
        day = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def _change_kind(value: int) -> str:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return "neutral"


def _full_name(intern: dict) -> str:
    return f"{intern.get('firstName', '')} {intern.get('lastName', '')}".strip()


def _join(values: list[str] | None) -> str:
    return ", ".join(values) if values else NOT_AVAILABLE


def _form_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(value)
    return str(value)
