"""Intern Routes — REST CRUD over intern records.

Invariants:
    - Every response is the {success, ...} envelope; failures raise domain errors
      that the global handlers translate (400/404/409)
    - Request bodies are accepted as JSON objects and validated by the core validator,
      so a bad payload reports every violation at once

Design Decisions:
    - confirm parsed as a string and compared to "true": only an explicit true deletes
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from intern_tracker.api.dependencies import get_intern_service
from intern_tracker.core.domain_types import MAX_PAGE_SIZE
from intern_tracker.services.intern_service import InternService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/interns", tags=["interns"])


@router.get("")
async def list_interns(
    search: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    department: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    order: str | None = Query(None),
    page: int | None = Query(None, ge=1),
    limit: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE),
    service: InternService = Depends(get_intern_service),
):
    """List interns with optional search, filters, sorting and paging."""
    result = await service.list_interns(
        search=search, status=status_filter, department=department,
        sort_by=sort_by, order=order, page=page, limit=limit,
    )
    return {"success": True, **result}


@router.get("/{intern_id}")
async def get_intern(
    intern_id: str, service: InternService = Depends(get_intern_service),
):
    """Get one intern with derived fields."""
    return {"success": True, "data": await service.get(intern_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_intern(
    payload: dict[str, Any] = Body(...),
    service: InternService = Depends(get_intern_service),
):
    """Create an intern. Status defaults to Pending."""
    created = await service.create(payload)
    return {
        "success": True,
        "message": "Intern created successfully",
        "data": created,
    }


@router.put("/{intern_id}")
async def update_intern(
    intern_id: str,
    payload: dict[str, Any] = Body(...),
    service: InternService = Depends(get_intern_service),
):
    """Partially update an intern. Empty values leave fields unchanged."""
    updated, changed = await service.update(intern_id, payload)
    return {
        "success": True,
        "message": "Intern updated successfully",
        "data": updated,
        "updatedFields": changed,
    }


@router.delete("/{intern_id}")
async def delete_intern(
    intern_id: str,
    confirm: str | None = Query(None),
    service: InternService = Depends(get_intern_service),
):
    """Delete an intern. Requires ?confirm=true and a non-Active status."""
    deleted_at = await service.delete(
        intern_id, confirm=(confirm or "").strip().lower() == "true",
    )
    return {
        "success": True,
        "message": f"Intern {intern_id} deleted successfully",
        "deletedAt": deleted_at,
    }
