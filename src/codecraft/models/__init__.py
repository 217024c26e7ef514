"""Data models and type definitions"""

from codecraft.models.errors import InvalidActionError, RecordNotFoundError
from codecraft.models.records import (
    DeploymentCreate,
    DeploymentRecord,
    DeploymentUpdate,
    FunctionBlockCreate,
    FunctionBlockRecord,
    GitCommitCreate,
    GitCommitRecord,
    HistoryCreate,
    HistoryRecord,
    IssueCreate,
    IssueRecord,
    IssueUpdate,
    LlmFixCreate,
    LlmFixRecord,
    LlmFixUpdate,
    ProjectCreate,
    ProjectRecord,
    ProjectUpdate,
    UserCreate,
    UserRecord,
)

__all__ = [
    "DeploymentCreate",
    "DeploymentRecord",
    "DeploymentUpdate",
    "FunctionBlockCreate",
    "FunctionBlockRecord",
    "GitCommitCreate",
    "GitCommitRecord",
    "HistoryCreate",
    "HistoryRecord",
    "InvalidActionError",
    "IssueCreate",
    "IssueRecord",
    "IssueUpdate",
    "LlmFixCreate",
    "LlmFixRecord",
    "LlmFixUpdate",
    "ProjectCreate",
    "ProjectRecord",
    "ProjectUpdate",
    "RecordNotFoundError",
    "UserCreate",
    "UserRecord",
]
