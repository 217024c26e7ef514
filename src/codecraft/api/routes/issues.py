"""Issue routes for the API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import not_found, parse_project_payload
from codecraft.models import IssueCreate, IssueRecord, IssueUpdate

router = APIRouter(prefix="/projects/{project_id}/issues", tags=["issues"])


@router.get(
    "",
    response_model=list[IssueRecord],
    summary="List issues",
    description="Return findings for a project. Unknown projects yield an empty list.",
)
def list_issues(project_id: int, storage: StorageDep) -> list[IssueRecord]:
    return storage.get_project_issues(project_id)


@router.post(
    "",
    response_model=IssueRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record an issue",
    responses={400: {"description": "Invalid issue data"}, 404: {"description": "Project not found"}},
)
def create_issue(
    project: ProjectDep,
    storage: StorageDep,
    body: dict[str, Any] = Body(...),
) -> IssueRecord:
    data = parse_project_payload(IssueCreate, body, project.id, "issue")
    return storage.create_issue(data)


@router.patch(
    "/{issue_id}",
    response_model=IssueRecord,
    summary="Update an issue",
    description="Update fields such as status. Any status may replace any other.",
    responses={404: {"description": "Issue not found"}},
)
def update_issue(
    project_id: int, issue_id: int, data: IssueUpdate, storage: StorageDep
) -> IssueRecord:
    existing = storage.get_issue(issue_id)
    if existing is None or existing.project_id != project_id:
        raise not_found("Issue")
    issue = storage.update_issue(issue_id, data)
    if issue is None:
        raise not_found("Issue")
    return issue
