"""Record types shared by the storage backends and the API.

Each entity has three shapes:
- ``<Name>Create``: insert payload (no id, no server-side timestamps)
- ``<Name>Update``: partial update payload; only optional columns accept null
- ``<Name>Record``: the stored record as returned to callers
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from codecraft.constants import (
    ActionType,
    DeploymentStatus,
    DeploymentStatusSummary,
    Environment,
    FixStatus,
    InputType,
    IssueStatus,
    ProjectStatus,
    Severity,
)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _UpdatePayload(_Payload):
    """Partial update. Fields left out stay as they are.

    Only fields named in ``nullable_fields`` may be explicitly set to null;
    the rest map to required columns.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> _UpdatePayload:
        nulled = sorted(
            name
            for name in self.model_fields_set - self.nullable_fields
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Projects


class ProjectCreate(_Payload):
    name: str = Field(..., min_length=1, description="Display name of the project")
    input_type: InputType
    sonar_project_key: str = Field(..., min_length=1)
    status: ProjectStatus
    last_scan: datetime | None = None
    fix_percentage: int = Field(0, ge=0, le=100)
    deployment_status: DeploymentStatusSummary
    description: str | None = None


class ProjectUpdate(_UpdatePayload):
    nullable_fields = frozenset({"last_scan", "description"})

    name: str | None = Field(None, min_length=1)
    input_type: InputType | None = None
    sonar_project_key: str | None = Field(None, min_length=1)
    status: ProjectStatus | None = None
    last_scan: datetime | None = None
    fix_percentage: int | None = Field(None, ge=0, le=100)
    deployment_status: DeploymentStatusSummary | None = None
    description: str | None = None


class ProjectRecord(_Record):
    id: int
    name: str
    input_type: str
    sonar_project_key: str
    status: str
    last_scan: datetime | None = None
    fix_percentage: int = 0
    deployment_status: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


# Issues


class IssueCreate(_Payload):
    project_id: int
    file_path: str
    line_start: int = Field(..., ge=0)
    line_end: int = Field(..., ge=0)
    severity: Severity
    vuln_type: str
    message: str
    code_snippet: str | None = None
    status: IssueStatus
    tags: list[str] = Field(default_factory=list)


class IssueUpdate(_UpdatePayload):
    nullable_fields = frozenset({"code_snippet"})

    file_path: str | None = None
    line_start: int | None = Field(None, ge=0)
    line_end: int | None = Field(None, ge=0)
    severity: Severity | None = None
    vuln_type: str | None = None
    message: str | None = None
    code_snippet: str | None = None
    status: IssueStatus | None = None
    tags: list[str] | None = None


class IssueRecord(_Record):
    id: int
    project_id: int
    file_path: str
    line_start: int
    line_end: int
    severity: str
    vuln_type: str
    message: str
    code_snippet: str | None = None
    status: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime


# Function blocks


class FunctionBlockCreate(_Payload):
    project_id: int
    file_path: str
    function_name: str
    line_start: int = Field(..., ge=0)
    line_end: int = Field(..., ge=0)
    block_type: str
    code_snippet: str | None = None


class FunctionBlockRecord(_Record):
    id: int
    project_id: int
    file_path: str
    function_name: str
    line_start: int
    line_end: int
    block_type: str
    code_snippet: str | None = None
    created_at: datetime


# LLM fixes


class LlmFixCreate(_Payload):
    project_id: int
    issue_id: int | None = None
    function_name: str
    llm_response: str
    original_code: str | None = None
    fixed_code: str | None = None
    status: FixStatus


class LlmFixUpdate(_UpdatePayload):
    nullable_fields = frozenset({"issue_id", "original_code", "fixed_code"})

    issue_id: int | None = None
    function_name: str | None = None
    llm_response: str | None = None
    original_code: str | None = None
    fixed_code: str | None = None
    status: FixStatus | None = None


class LlmFixRecord(_Record):
    id: int
    project_id: int
    issue_id: int | None = None
    function_name: str
    llm_response: str
    original_code: str | None = None
    fixed_code: str | None = None
    status: str
    created_at: datetime


# Git commits


class GitCommitCreate(_Payload):
    project_id: int
    commit_hash: str = Field(..., min_length=1)
    author: str
    message: str
    committed_at: datetime


class GitCommitRecord(_Record):
    id: int
    project_id: int
    commit_hash: str
    author: str
    message: str
    committed_at: datetime
    created_at: datetime


# Deployments


class DeploymentCreate(_Payload):
    project_id: int
    environment: Environment
    status: DeploymentStatus
    deployed_at: datetime | None = None
    scan_id: int | None = None
    fix_id: int | None = None


class DeploymentUpdate(_UpdatePayload):
    nullable_fields = frozenset({"deployed_at", "scan_id", "fix_id"})

    environment: Environment | None = None
    status: DeploymentStatus | None = None
    deployed_at: datetime | None = None
    scan_id: int | None = None
    fix_id: int | None = None


class DeploymentRecord(_Record):
    id: int
    project_id: int
    environment: str
    status: str
    deployed_at: datetime | None = None
    scan_id: int | None = None
    fix_id: int | None = None
    created_at: datetime


# History


class HistoryCreate(_Payload):
    project_id: int
    action_type: ActionType
    action_data: dict[str, Any] | None = None
    status: str


class HistoryRecord(_Record):
    id: int
    project_id: int
    action_type: str
    action_data: dict[str, Any] | None = None
    status: str
    created_at: datetime


# Users


class UserCreate(_Payload):
    """Insert payload for a user. ``password`` is plaintext and is hashed by storage callers."""

    username: str = Field(..., min_length=1, max_length=128)
    password: str = Field(..., min_length=1)


class UserRecord(_Record):
    id: str
    username: str
    password_hash: str
