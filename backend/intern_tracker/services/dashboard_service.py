"""Dashboard Service — loads every record and hands it to the pure aggregator."""

from collections.abc import Callable
from datetime import datetime

from intern_tracker.core.dashboard_stats import compute_dashboard_stats
from intern_tracker.core.repository_protocols import InternRepository
from intern_tracker.core.timestamps import to_iso, utc_now


class DashboardService:

    def __init__(
        self,
        store: InternRepository,
        clock: Callable[[], datetime] = utc_now,
        interviews_scheduled: int = 0,
    ):
        self.store = store
        self.clock = clock
        self.interviews_scheduled = interviews_scheduled

    async def get_stats(self) -> dict:
        records = await self.store.load_all()
        now = self.clock()
        stats = compute_dashboard_stats(records, now, self.interviews_scheduled)
        stats["generatedAt"] = to_iso(now)
        return stats
