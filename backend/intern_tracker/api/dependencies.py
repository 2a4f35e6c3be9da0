"""Route Dependencies — wire services to the store singleton and the clock.

Design Decisions:
    - Clock is a dependency so tests pin "now" with app.dependency_overrides
"""

from collections.abc import Callable
from datetime import datetime

from fastapi import Depends

from intern_tracker.config import get_settings
from intern_tracker.core.timestamps import utc_now
from intern_tracker.infrastructure.json_store import JsonInternStore, get_store
from intern_tracker.services.dashboard_service import DashboardService
from intern_tracker.services.intern_service import InternService


def get_clock() -> Callable[[], datetime]:
    return utc_now


def get_intern_service(
    store: JsonInternStore = Depends(get_store),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> InternService:
    return InternService(store, clock)


def get_dashboard_service(
    store: JsonInternStore = Depends(get_store),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> DashboardService:
    return DashboardService(
        store, clock, interviews_scheduled=get_settings().interviews_scheduled,
    )
