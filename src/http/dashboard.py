from typing import Any, Dict

from src.shared.collection_store import CollectionStores
from src.shared.settings import AppSettings
from src.specs.common.enums import PublishStatus, ScheduleStatus
from src.specs.models.domain import Dashboard, DashboardStats, MonthlySales, SalesTrends
from src.specs.models.http import HealthResponse

RECENT_DESIGNS = 5
RECENT_HISTORY = 10

_MONTHLY_SALES = [
    ("Oct 2025", 2500),
    ("Nov 2025", 3200),
    ("Dec 2025", 4100),
    ("Jan 2026", 3800),
    ("Feb 2026", 4600),
]


def build_dashboard(stores: CollectionStores) -> Dict[str, Any]:
    # "Recent" means first N in stored order; records are not re-sorted by createdAt
    designs = stores.designs.records()
    schedules = stores.schedules.records()
    history = stores.history.records()

    scheduled = [s for s in schedules if s.get("status") == ScheduleStatus.SCHEDULED.value]
    published = [h for h in history if h.get("status") == PublishStatus.PUBLISHED.value]

    dashboard = Dashboard(
        recentDesigns=designs[:RECENT_DESIGNS],
        scheduledPosts=scheduled,
        publishingHistory=history[:RECENT_HISTORY],
        stats=DashboardStats(
            totalDesigns=len(designs),
            totalScheduled=len(scheduled),
            totalPublished=len(published),
        ),
    )
    return dashboard.model_dump(mode="json")


def sales_trends() -> Dict[str, Any]:
    trends = SalesTrends(
        monthly_trends=[MonthlySales(month=m, sales=s) for m, s in _MONTHLY_SALES]
    )
    return trends.model_dump(mode="json")


def health(settings: AppSettings) -> Dict[str, Any]:
    return HealthResponse(status="ok", service=settings.serviceName).model_dump()
