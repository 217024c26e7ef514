"""Simulated workflow routes: scan, cancel, fix, merge, diff, rescan, deploy."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from codecraft.api.dependencies import StorageDep
from codecraft.api.schemas.actions import (
    DeployRequest,
    DiffResponse,
    MergeFixRequest,
    ScanCancelResponse,
    ScanPrepareResponse,
    ScanRequest,
    ScanResponse,
)
from codecraft.api.schemas.common import MessageResponse
from codecraft.models import DeploymentRecord
from codecraft.services import actions

router = APIRouter(prefix="/projects/{project_id}", tags=["actions"])

_NOT_FOUND = {404: {"description": "Project not found"}}


@router.post(
    "/scan/prepare",
    response_model=ScanPrepareResponse,
    summary="Prepare a scan",
    description="Return the directories that can be selected for scanning.",
    responses=_NOT_FOUND,
)
def prepare_scan(
    project_id: int, storage: StorageDep, request: ScanRequest | None = None
) -> ScanPrepareResponse:
    return ScanPrepareResponse(directories=actions.prepare_scan(storage, project_id))


@router.post(
    "/scan",
    response_model=ScanResponse,
    summary="Start a scan",
    description="Mark the project as scanning and record the request in history.",
    responses=_NOT_FOUND,
)
def start_scan(
    project_id: int, storage: StorageDep, request: ScanRequest | None = None
) -> ScanResponse:
    options = actions.ScanOptions(**(request or ScanRequest()).model_dump())
    started = actions.start_scan(storage, project_id, options)
    return ScanResponse(
        scan_id=started.scan_id,
        status=started.status,
        start_datetime=started.start_datetime,
    )


@router.post(
    "/scans/{scan_id}/cancel",
    response_model=ScanCancelResponse,
    summary="Cancel a scan",
    description="Record a cancellation. No running process exists to stop.",
    responses=_NOT_FOUND,
)
def cancel_scan(project_id: int, scan_id: int, storage: StorageDep) -> ScanCancelResponse:
    result = actions.cancel_scan(storage, project_id, scan_id)
    return ScanCancelResponse(scan_id=scan_id, status=result)


@router.post("/fix", response_model=MessageResponse, summary="Request an auto fix", responses=_NOT_FOUND)
def request_fix(project_id: int, storage: StorageDep) -> MessageResponse:
    actions.request_auto_fix(storage, project_id)
    return MessageResponse(message="Auto fix initiated successfully")


@router.post(
    "/merge_fix",
    response_model=MessageResponse,
    summary="Merge a fix",
    description="Mark the given fix as APPLIED and record the merge.",
    responses={404: {"description": "Project or fix not found"}},
)
def merge_fix(
    project_id: int, storage: StorageDep, request: MergeFixRequest | None = None
) -> MessageResponse:
    fix_id = request.fix_id if request else None
    actions.merge_fix(storage, project_id, fix_id)
    return MessageResponse(message="Fix merged successfully")


@router.get(
    "/diff",
    response_model=DiffResponse,
    summary="Get a fix diff",
    responses={400: {"description": "Fix ID required"}, 404: {"description": "Fix not found"}},
)
def get_diff(
    project_id: int,
    storage: StorageDep,
    fix_id: Annotated[int | None, Query(description="Fix to diff")] = None,
) -> DiffResponse:
    fix = actions.get_fix_diff(storage, project_id, fix_id)
    return DiffResponse(
        original_code=fix.original_code,
        fixed_code=fix.fixed_code,
        function_name=fix.function_name,
    )


@router.post("/rescan", response_model=MessageResponse, summary="Rescan a project", responses=_NOT_FOUND)
def rescan(project_id: int, storage: StorageDep) -> MessageResponse:
    actions.rescan_project(storage, project_id)
    return MessageResponse(message="Rescan initiated successfully")


@router.post(
    "/deploy",
    response_model=DeploymentRecord,
    summary="Deploy a project",
    description="Create a DEPLOYING deployment, defaulting to STAGING.",
    responses=_NOT_FOUND,
)
def deploy(
    project_id: int, storage: StorageDep, request: DeployRequest | None = None
) -> DeploymentRecord:
    environment = request.environment if request else None
    return actions.deploy_project(storage, project_id, environment)
