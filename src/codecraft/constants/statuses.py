"""Status and category enumerations for dashboard records.

None of these enumerations enforce legal transitions; any value may be
written over any other.
"""

from __future__ import annotations

from enum import StrEnum


class InputType(StrEnum):
    """How the project source was provided."""

    GIT = "GIT"
    UPLOAD = "UPLOAD"


class ProjectStatus(StrEnum):
    """Scan state of a project."""

    SCAN_COMPLETED = "SCAN_COMPLETED"
    SCANNING = "SCANNING"
    FAILED = "FAILED"


class DeploymentStatusSummary(StrEnum):
    """Deployment state shown on the project itself."""

    DEPLOYED = "DEPLOYED"
    PENDING = "PENDING"
    FAILED = "FAILED"


class Severity(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class IssueStatus(StrEnum):
    PENDING = "PENDING"
    FIXED = "FIXED"
    IGNORED = "IGNORED"


class FixStatus(StrEnum):
    FIX_READY = "FIX_READY"
    APPLIED = "APPLIED"
    REJECTED = "REJECTED"


class Environment(StrEnum):
    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"


class DeploymentStatus(StrEnum):
    DEPLOYED = "DEPLOYED"
    DEPLOYING = "DEPLOYING"
    FAILED = "FAILED"


class ActionType(StrEnum):
    """Kind of simulated action recorded in history."""

    SCAN = "SCAN"
    FIX = "FIX"
    DEPLOY = "DEPLOY"
    MERGE = "MERGE"


class HistoryStatus(StrEnum):
    """Common history outcomes. History status is free text; these are the values the app writes."""

    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Directories offered when preparing a scan
MOCK_SCAN_DIRECTORIES = (
    "src/",
    "tests/",
    "docs/",
    "config/",
    "public/",
    "assets/",
)
