"""Dashboard Routes — aggregate metrics for the dashboard cards."""

from fastapi import APIRouter, Depends

from intern_tracker.api.dependencies import get_dashboard_service
from intern_tracker.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats")
async def dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
):
    """Metrics, trends and insights over every intern record."""
    return {"success": True, "data": await service.get_stats()}
