"""
Service layer for dashboard statistics.

All figures are simple reductions over the current stores; averages use
the same half‑up rounding as engagement scoring.
"""

from ..core.store import DataStore
from ..schemas.dashboard import DashboardMetrics
from .engagement_service import round_half_up


class DashboardService:
    """Aggregated metrics shown on the dashboard landing page."""

    @classmethod
    async def metrics(cls, store: DataStore) -> DashboardMetrics:
        youths = store.youths.list()
        count = len(youths)
        avg_engagement = round_half_up(sum(y.engagement_score for y in youths) / count) if count else 0
        avg_attendance = round_half_up(sum(y.attendance_rate for y in youths) / count) if count else 0
        return DashboardMetrics(
            active_youths=sum(1 for y in youths if y.status == "active"),
            # Disengaged youths need outreach too, so they count as at risk here.
            at_risk_youths=sum(1 for y in youths if y.engagement_status in ("at-risk", "disengaged")),
            total_programs=len(store.programs),
            attendance_records=len(store.attendance),
            avg_engagement=avg_engagement,
            avg_attendance=avg_attendance,
        )
