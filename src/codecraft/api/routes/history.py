"""History routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codecraft.api.dependencies import StorageDep
from codecraft.models import HistoryRecord

router = APIRouter(tags=["history"])


@router.get(
    "/projects/{project_id}/history",
    response_model=list[HistoryRecord],
    summary="Project history",
    description="Return actions recorded for a project, newest first.",
)
def list_project_history(project_id: int, storage: StorageDep) -> list[HistoryRecord]:
    return storage.get_project_history(project_id)


@router.get(
    "/history",
    response_model=list[HistoryRecord],
    summary="All history",
    description="Return actions recorded across all projects, newest first.",
)
def list_history(storage: StorageDep) -> list[HistoryRecord]:
    return storage.get_all_history()
