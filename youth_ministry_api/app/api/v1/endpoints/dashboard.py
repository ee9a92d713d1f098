"""Dashboard endpoints for API v1."""

from fastapi import APIRouter, Depends

from youth_ministry_api.app.core.security import get_current_user
from youth_ministry_api.app.core.store import DataStore, get_store
from youth_ministry_api.app.schemas.dashboard import DashboardMetrics
from youth_ministry_api.app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/metrics", response_model=DashboardMetrics)
async def get_metrics(
    store: DataStore = Depends(get_store),
    current_user: dict = Depends(get_current_user),
) -> DashboardMetrics:
    """Return headline figures: active and at‑risk youths, averages and totals."""
    return await DashboardService.metrics(store)
