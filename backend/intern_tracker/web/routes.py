"""Dashboard UI Routes — the server-rendered page, its fragments, and form posts.

Invariants:
    - Each handler calls the same services as the JSON API and renders the payload
      through view_models; no business rule is evaluated here
    - Domain errors on fragment requests render a notification with the error's status
    - Form posts always redirect (303) back to the page with a notice; failures are
      reported through the notice, never dropped

Design Decisions:
    - Plain HTML forms + redirect-after-post over client-side fetch: the page works
      without JavaScript and each render reflects the current file contents
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from intern_tracker.api.dependencies import get_dashboard_service, get_intern_service
from intern_tracker.core.errors import InternTrackerError
from intern_tracker.services.dashboard_service import DashboardService
from intern_tracker.services.intern_service import InternService
from intern_tracker.web.view_models import (
    Notification,
    build_filter_notification,
    build_filter_view,
    build_intern_detail,
    build_intern_form,
    build_intern_rows,
    build_metric_cards,
    notification_for_error,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ui"], include_in_schema=False)

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_NOTICE_LEVELS = {"success", "error", "warning", "info"}


@router.get("/", response_class=HTMLResponse, name="dashboard_page")
async def dashboard_page(
    request: Request,
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    department: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    view: str | None = Query(None),
    edit: str | None = Query(None),
    notice: str | None = Query(None),
    level: str | None = Query(None),
    interns: InternService = Depends(get_intern_service),
    dashboard: DashboardService = Depends(get_dashboard_service),
):
    """Full dashboard: metric cards, filters, table, optional detail and form."""
    filters = build_filter_view(search, status_filter, department, sort_by)
    notification = _notice_from_query(notice, level)

    metric_cards, metrics_error = None, None
    try:
        metric_cards = build_metric_cards(await dashboard.get_stats())
    except InternTrackerError as e:
        logger.warning(f"Dashboard metrics failed: {e.message}", extra={"error_code": e.code})
        metrics_error = "Failed to load dashboard metrics"

    rows, table_error = [], None
    try:
        listing = await interns.list_interns(
            search=search, status=status_filter, department=department, sort_by=sort_by,
        )
        rows = build_intern_rows(listing["data"])
        notification = notification or build_filter_notification(len(rows), filters)
    except InternTrackerError as e:
        table_error = "Failed to load intern data"
        notification = notification_for_error(e, "load")

    detail, form = None, build_intern_form()
    try:
        if view:
            detail = build_intern_detail(await interns.get(view))
        if edit:
            form = build_intern_form(await interns.get(edit))
    except InternTrackerError as e:
        notification = notification_for_error(e, "load")

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "notification": notification,
            "metric_cards": metric_cards,
            "metrics_error": metrics_error,
            "filters": filters,
            "rows": rows,
            "table_error": table_error,
            "detail": detail,
            "form": form,
        },
    )


# --- Fragments ----------------------------------------------------------------

@router.get("/ui/fragments/metrics", response_class=HTMLResponse)
async def metrics_fragment(
    request: Request, dashboard: DashboardService = Depends(get_dashboard_service),
):
    try:
        cards = build_metric_cards(await dashboard.get_stats())
    except InternTrackerError as e:
        return _error_state(request, "Failed to load dashboard metrics", e.http_status)
    return templates.TemplateResponse(
        request, "fragments/metric_cards.html", {"metric_cards": cards},
    )


@router.get("/ui/fragments/interns", response_class=HTMLResponse)
async def interns_fragment(
    request: Request,
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    department: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    interns: InternService = Depends(get_intern_service),
):
    try:
        listing = await interns.list_interns(
            search=search, status=status_filter, department=department, sort_by=sort_by,
        )
    except InternTrackerError as e:
        return _notification(request, notification_for_error(e, "load"), e.http_status)
    return templates.TemplateResponse(
        request,
        "fragments/intern_rows.html",
        {"rows": build_intern_rows(listing["data"]), "table_error": None},
    )


@router.get("/ui/fragments/interns/{intern_id}", response_class=HTMLResponse)
async def intern_detail_fragment(
    request: Request,
    intern_id: str,
    interns: InternService = Depends(get_intern_service),
):
    try:
        intern = await interns.get(intern_id)
    except InternTrackerError as e:
        return _notification(request, notification_for_error(e, "load"), e.http_status)
    return templates.TemplateResponse(
        request, "fragments/intern_detail.html", {"detail": build_intern_detail(intern)},
    )


# --- Form posts ---------------------------------------------------------------

@router.post("/ui/interns", name="ui_create_intern")
async def create_from_form(
    request: Request, interns: InternService = Depends(get_intern_service),
):
    form = dict(await request.form())
    try:
        created = await interns.create(form)
    except InternTrackerError as e:
        return _redirect(request, notification_for_error(e, "create"))
    return _redirect(request, Notification(
        f"Application for {created['fullName']} submitted successfully "
        f"({created['id']}). We will review it and get back soon.",
        "success",
    ))


@router.post("/ui/interns/{intern_id}", name="ui_update_intern")
async def update_from_form(
    request: Request,
    intern_id: str,
    interns: InternService = Depends(get_intern_service),
):
    form = dict(await request.form())
    try:
        _, changed = await interns.update(intern_id, form)
    except InternTrackerError as e:
        return _redirect(request, notification_for_error(e, "update"), edit=intern_id)
    message = (
        f"Intern {intern_id} updated: {', '.join(changed)}." if changed
        else f"No changes to intern {intern_id}."
    )
    return _redirect(request, Notification(message, "success"), view=intern_id)


@router.post("/ui/interns/{intern_id}/delete", name="ui_delete_intern")
async def delete_from_form(
    request: Request,
    intern_id: str,
    interns: InternService = Depends(get_intern_service),
):
    form = await request.form()
    confirmed = str(form.get("confirm", "")).lower() in ("true", "on")
    try:
        await interns.delete(intern_id, confirm=confirmed)
    except InternTrackerError as e:
        return _redirect(request, notification_for_error(e, "delete"), view=intern_id)
    return _redirect(request, Notification(f"Intern {intern_id} deleted.", "success"))


# --- Helpers ------------------------------------------------------------------

def _notice_from_query(notice: str | None, level: str | None) -> Notification | None:
    if not notice:
        return None
    return Notification(notice, level if level in _NOTICE_LEVELS else "info")


def _redirect(request: Request, notification: Notification, **params: str) -> RedirectResponse:
    url = request.url_for("dashboard_page").include_query_params(
        notice=notification.message, level=notification.level, **params,
    )
    return RedirectResponse(str(url), status_code=status.HTTP_303_SEE_OTHER)


def _notification(request: Request, notification: Notification, status_code: int):
    return templates.TemplateResponse(
        request,
        "fragments/notification.html",
        {"notification": notification},
        status_code=status_code,
    )


def _error_state(request: Request, message: str, status_code: int):
    return templates.TemplateResponse(
        request,
        "fragments/error_state.html",
        {"message": message, "retry_url": request.url_for("dashboard_page")},
        status_code=status_code,
    )
