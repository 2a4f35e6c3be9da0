"""Health & Status Probes — liveness, readiness and version endpoints.

Invariants:
    - GET /api/health always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the data file is unreadable (readiness)
"""

import logging
import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from intern_tracker.config import get_settings
from intern_tracker.core.timestamps import to_iso, utc_now
from intern_tracker.infrastructure.json_store import JsonInternStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])

_started_at = time.monotonic()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "success": True,
        "status": "OK",
        "message": "Intern Dashboard Server is running",
        "timestamp": to_iso(utc_now()),
        "uptime": round(time.monotonic() - _started_at, 3),
        "environment": settings.environment,
    }


@router.get("/health/ready")
async def readiness_check(store: JsonInternStore = Depends(get_store)):
    """Readiness probe — includes data file readability."""
    if not await store.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"success": True, "status": "ready", "checks": {"store": "healthy"}}


@router.get("/status")
async def api_status():
    settings = get_settings()
    return {
        "success": True,
        "server": settings.app_name,
        "version": settings.app_version,
        "status": "active",
    }
