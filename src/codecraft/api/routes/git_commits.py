"""Git commit routes for the API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import parse_project_payload
from codecraft.models import GitCommitCreate, GitCommitRecord

router = APIRouter(prefix="/projects/{project_id}/git_commits", tags=["git_commits"])


@router.get("", response_model=list[GitCommitRecord], summary="List git commits")
def list_git_commits(project_id: int, storage: StorageDep) -> list[GitCommitRecord]:
    return storage.get_project_git_commits(project_id)


@router.post(
    "",
    response_model=GitCommitRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record a git commit",
    responses={400: {"description": "Invalid git commit data"}, 404: {"description": "Project not found"}},
)
def create_git_commit(
    project: ProjectDep,
    storage: StorageDep,
    body: dict[str, Any] = Body(...),
) -> GitCommitRecord:
    data = parse_project_payload(GitCommitCreate, body, project.id, "git commit")
    return storage.create_git_commit(data)
