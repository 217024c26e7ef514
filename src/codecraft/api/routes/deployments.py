"""Deployment routes for the API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from codecraft.api.dependencies import ProjectDep, StorageDep
from codecraft.api.routes.common import not_found, parse_project_payload
from codecraft.models import DeploymentCreate, DeploymentRecord, DeploymentUpdate

router = APIRouter(prefix="/projects/{project_id}/deployments", tags=["deployments"])


@router.get("", response_model=list[DeploymentRecord], summary="List deployments")
def list_deployments(project_id: int, storage: StorageDep) -> list[DeploymentRecord]:
    return storage.get_project_deployments(project_id)


@router.post(
    "",
    response_model=DeploymentRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record a deployment",
    description="No prior scan is required.",
    responses={400: {"description": "Invalid deployment data"}, 404: {"description": "Project not found"}},
)
def create_deployment(
    project: ProjectDep,
    storage: StorageDep,
    body: dict[str, Any] = Body(...),
) -> DeploymentRecord:
    data = parse_project_payload(DeploymentCreate, body, project.id, "deployment")
    return storage.create_deployment(data)


@router.patch(
    "/{deployment_id}",
    response_model=DeploymentRecord,
    summary="Update a deployment",
    responses={404: {"description": "Deployment not found"}},
)
def update_deployment(
    project_id: int, deployment_id: int, data: DeploymentUpdate, storage: StorageDep
) -> DeploymentRecord:
    if not any(d.id == deployment_id for d in storage.get_project_deployments(project_id)):
        raise not_found("Deployment")
    deployment = storage.update_deployment(deployment_id, data)
    if deployment is None:
        raise not_found("Deployment")
    return deployment
