from __future__ import annotations

from codecraft.constants.statuses import (
    MOCK_SCAN_DIRECTORIES,
    ActionType,
    DeploymentStatus,
    DeploymentStatusSummary,
    Environment,
    FixStatus,
    HistoryStatus,
    InputType,
    IssueStatus,
    ProjectStatus,
    Severity,
)

__all__ = [
    "ActionType",
    "DeploymentStatus",
    "DeploymentStatusSummary",
    "Environment",
    "FixStatus",
    "HistoryStatus",
    "InputType",
    "IssueStatus",
    "MOCK_SCAN_DIRECTORIES",
    "ProjectStatus",
    "Severity",
]
