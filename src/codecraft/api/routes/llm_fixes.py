"""LLM fix routes for the API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import not_found, parse_project_payload
from codecraft.models import LlmFixCreate, LlmFixRecord, LlmFixUpdate

router = APIRouter(prefix="/projects/{project_id}/llm_fixes", tags=["llm_fixes"])


@router.get("", response_model=list[LlmFixRecord], summary="List LLM fixes")
def list_llm_fixes(project_id: int, storage: StorageDep) -> list[LlmFixRecord]:
    return storage.get_project_llm_fixes(project_id)


@router.post(
    "",
    response_model=LlmFixRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record an LLM fix",
    responses={400: {"description": "Invalid LLM fix data"}, 404: {"description": "Project not found"}},
)
def create_llm_fix(
    project: ProjectDep,
    storage: StorageDep,
    body: dict[str, Any] = Body(...),
) -> LlmFixRecord:
    data = parse_project_payload(LlmFixCreate, body, project.id, "LLM fix")
    return storage.create_llm_fix(data)


@router.patch(
    "/{fix_id}",
    response_model=LlmFixRecord,
    summary="Update an LLM fix",
    responses={404: {"description": "Fix not found"}},
)
def update_llm_fix(
    project_id: int, fix_id: int, data: LlmFixUpdate, storage: StorageDep
) -> LlmFixRecord:
    existing = storage.get_llm_fix(fix_id)
    if existing is None or existing.project_id != project_id:
        raise not_found("Fix")
    fix = storage.update_llm_fix(fix_id, data)
    if fix is None:
        raise not_found("Fix")
    return fix
