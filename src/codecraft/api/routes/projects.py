"""Project routes for the API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import not_found
from codecraft.models import ProjectCreate, ProjectRecord, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRecord],
    summary="List projects",
    description="Return all tracked projects in creation order.",
)
def list_projects(storage: StorageDep) -> list[ProjectRecord]:
    return storage.get_projects()


@router.get(
    "/{project_id}",
    response_model=ProjectRecord,
    summary="Get a project",
    description="Return a single project by ID.",
    responses={404: {"description": "Project not found"}},
)
def get_project(project: ProjectDep) -> ProjectRecord:
    return project


@router.post(
    "",
    response_model=ProjectRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={400: {"description": "Invalid project data"}},
)
def create_project(data: ProjectCreate, storage: StorageDep) -> ProjectRecord:
    return storage.create_project(data)


@router.patch(
    "/{project_id}",
    response_model=ProjectRecord,
    summary="Update a project",
    description="Update editable fields on a project by ID. Only provided fields change.",
    responses={404: {"description": "Project not found"}},
)
def update_project(project_id: int, data: ProjectUpdate, storage: StorageDep) -> ProjectRecord:
    project = storage.update_project(project_id, data)
    if project is None:
        raise not_found("Project")
    return project


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    description="Delete a project together with its issues, fixes, commits, deployments and history.",
    responses={404: {"description": "Project not found"}},
)
def delete_project(project_id: int, storage: StorageDep) -> Response:
    if not storage.delete_project(project_id):
        raise not_found("Project")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
