"""Dashboard statistics routes."""

from __future__ import annotations

from fastapi import APIRouter

from codecraft.api.dependencies import StorageDep
from codecraft.api.schemas.stats import StatsResponse
from codecraft.services.stats import compute_dashboard_stats

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsResponse, summary="Dashboard statistics")
def get_stats(storage: StorageDep) -> StatsResponse:
    return StatsResponse(**compute_dashboard_stats(storage))
