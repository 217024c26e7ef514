"""Simulated scan, fix, merge and deploy workflows.

Nothing here runs a scanner, an LLM, git or a deployment pipeline. Each
action updates the stored records the dashboard displays and appends a
history row describing what was requested. Scan progress is tracked by the
client; the server only hands back a scan id.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from codecraft.constants import (
    MOCK_SCAN_DIRECTORIES,
    ActionType,
    DeploymentStatus,
    Environment,
    FixStatus,
    HistoryStatus,
    ProjectStatus,
)
from codecraft.models import (
    DeploymentCreate,
    DeploymentRecord,
    HistoryCreate,
    InvalidActionError,
    LlmFixRecord,
    LlmFixUpdate,
    ProjectRecord,
    ProjectUpdate,
    RecordNotFoundError,
)

if TYPE_CHECKING:
    from codecraft.storage import Storage

logger = logging.getLogger(__name__)

__all__ = [
    "ScanOptions",
    "ScanStarted",
    "cancel_scan",
    "deploy_project",
    "get_fix_diff",
    "merge_fix",
    "prepare_scan",
    "request_auto_fix",
    "require_project",
    "rescan_project",
    "start_scan",
]

# Scan ids are display-only and are not persisted
_MAX_SCAN_ID = 999


@dataclass(slots=True)
class ScanOptions:
    """Parameters a user picks when starting a scan.

    Credentials are accepted so the request shape matches the form, but they
    are never written to history.
    """

    scan_type: str | None = None
    selected_directories: list[str] | None = None
    exclusions: list[str] | None = None
    repo_url: str | None = None
    git_username: str | None = None
    git_password: str | None = None
    language: str | None = None

    def history_data(self) -> dict[str, Any]:
        return {
            "scan_type": self.scan_type,
            "selected_directories": self.selected_directories,
            "exclusions": self.exclusions,
            "language": self.language,
        }


@dataclass(slots=True)
class ScanStarted:
    scan_id: int
    status: str
    start_datetime: datetime


def require_project(storage: Storage, project_id: int) -> ProjectRecord:
    """Return the project or raise ``RecordNotFoundError``."""
    project = storage.get_project(project_id)
    if project is None:
        raise RecordNotFoundError("Project", project_id)
    return project


def _record(
    storage: Storage,
    project_id: int,
    action_type: ActionType,
    action_data: dict[str, Any],
    status: str = HistoryStatus.COMPLETED,
) -> None:
    storage.create_history(
        HistoryCreate(
            project_id=project_id,
            action_type=action_type,
            action_data=action_data,
            status=status,
        )
    )


def prepare_scan(storage: Storage, project_id: int) -> list[str]:
    """Return the directories offered for selection before a scan."""
    require_project(storage, project_id)
    return list(MOCK_SCAN_DIRECTORIES)


def _mark_scanning(storage: Storage, project_id: int) -> None:
    storage.update_project(
        project_id,
        ProjectUpdate(status=ProjectStatus.SCANNING, last_scan=datetime.now(UTC)),
    )


def start_scan(storage: Storage, project_id: int, options: ScanOptions) -> ScanStarted:
    """Put the project into SCANNING and log the scan request."""
    require_project(storage, project_id)
    _mark_scanning(storage, project_id)
    _record(storage, project_id, ActionType.SCAN, options.history_data())

    started = ScanStarted(
        scan_id=random.randint(0, _MAX_SCAN_ID),
        status=ProjectStatus.SCANNING,
        start_datetime=datetime.now(UTC),
    )
    logger.info("Started scan %d for project %d", started.scan_id, project_id)
    return started


def cancel_scan(storage: Storage, project_id: int, scan_id: int) -> str:
    """Log a scan cancellation. Returns the resulting scan status."""
    require_project(storage, project_id)
    _record(
        storage,
        project_id,
        ActionType.SCAN,
        {"scan_id": scan_id, "action": "cancelled"},
        status=HistoryStatus.CANCELLED,
    )
    logger.info("Cancelled scan %d for project %d", scan_id, project_id)
    return HistoryStatus.CANCELLED


def rescan_project(storage: Storage, project_id: int) -> None:
    require_project(storage, project_id)
    _mark_scanning(storage, project_id)
    _record(storage, project_id, ActionType.SCAN, {"scan_type": "rescan"})
    logger.info("Rescan requested for project %d", project_id)


def request_auto_fix(storage: Storage, project_id: int) -> None:
    require_project(storage, project_id)
    _record(storage, project_id, ActionType.FIX, {"fix_type": "auto"})
    logger.info("Auto fix requested for project %d", project_id)


def _require_project_fix(storage: Storage, project_id: int, fix_id: int) -> LlmFixRecord:
    fix = storage.get_llm_fix(fix_id)
    if fix is None or fix.project_id != project_id:
        raise RecordNotFoundError("Fix", fix_id)
    return fix


def merge_fix(storage: Storage, project_id: int, fix_id: int | None) -> LlmFixRecord | None:
    """Mark a fix as applied (when one is given) and log the merge.

    Returns:
        The updated fix, or None when no fix id was supplied.

    Raises:
        RecordNotFoundError: If the project, or the given fix within it, does not exist.
    """
    require_project(storage, project_id)
    merged = None
    if fix_id is not None:
        _require_project_fix(storage, project_id, fix_id)
        merged = storage.update_llm_fix(fix_id, LlmFixUpdate(status=FixStatus.APPLIED))
    _record(storage, project_id, ActionType.MERGE, {"fix_id": fix_id})
    logger.info("Merged fix %s for project %d", fix_id, project_id)
    return merged


def get_fix_diff(storage: Storage, project_id: int, fix_id: int | None) -> LlmFixRecord:
    """Return the fix whose original and fixed code make up the diff.

    Raises:
        InvalidActionError: If no fix id was supplied.
        RecordNotFoundError: If the fix does not belong to the project.
    """
    if fix_id is None:
        raise InvalidActionError("Fix ID required")
    return _require_project_fix(storage, project_id, fix_id)


def deploy_project(
    storage: Storage, project_id: int, environment: Environment | None = None
) -> DeploymentRecord:
    """Record a deployment in progress and log it."""
    require_project(storage, project_id)
    target = environment or Environment.STAGING
    deployment = storage.create_deployment(
        DeploymentCreate(
            project_id=project_id,
            environment=target,
            status=DeploymentStatus.DEPLOYING,
            deployed_at=datetime.now(UTC),
        )
    )
    _record(
        storage,
        project_id,
        ActionType.DEPLOY,
        {"environment": target.value, "deployment_id": deployment.id},
    )
    logger.info("Deploying project %d to %s", project_id, target.value)
    return deployment
