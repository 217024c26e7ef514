"""Function block routes for the API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import parse_project_payload
from codecraft.models import FunctionBlockCreate, FunctionBlockRecord

router = APIRouter(prefix="/projects/{project_id}/function_blocks", tags=["function_blocks"])


@router.get("", response_model=list[FunctionBlockRecord], summary="List function blocks")
def list_function_blocks(project_id: int, storage: StorageDep) -> list[FunctionBlockRecord]:
    return storage.get_project_function_blocks(project_id)


@router.post(
    "",
    response_model=FunctionBlockRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record a function block",
    responses={
        400: {"description": "Invalid function block data"},
        404: {"description": "Project not found"},
    },
)
def create_function_block(
    project: ProjectDep,
    storage: StorageDep,
    body: dict[str, Any] = Body(...),
) -> FunctionBlockRecord:
    data = parse_project_payload(FunctionBlockCreate, body, project.id, "function block")
    return storage.create_function_block(data)
