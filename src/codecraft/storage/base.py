"""Abstract storage interface.

Route handlers and services depend on ``Storage``, never on a concrete
backend, so the in-memory and SQL backends are interchangeable. Per-project
list methods return an empty list for an unknown project and never raise.
Update methods return ``None`` when the target record does not exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codecraft.models import (
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
        UserRecord,
    )


class Storage(ABC):
    """Pluggable persistence layer for dashboard records."""

    # Users

    @abstractmethod
    def get_user(self, user_id: str) -> UserRecord | None:
        """Return a user by id."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return a user by unique username."""

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Persist a new user. The caller is responsible for hashing the password."""

    # Projects

    @abstractmethod
    def get_projects(self) -> list[ProjectRecord]:
        """Return all projects in id order."""

    @abstractmethod
    def get_project(self, project_id: int) -> ProjectRecord | None:
        """Return a single project."""

    @abstractmethod
    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        """Persist a new project with fresh timestamps."""

    @abstractmethod
    def update_project(self, project_id: int, data: ProjectUpdate) -> ProjectRecord | None:
        """Apply the fields set on ``data`` and refresh ``updated_at``."""

    @abstractmethod
    def delete_project(self, project_id: int) -> bool:
        """Delete a project and every record tagged with it.

        Returns:
            True if the project existed.
        """

    # Issues

    @abstractmethod
    def get_project_issues(self, project_id: int) -> list[IssueRecord]: ...

    @abstractmethod
    def get_issue(self, issue_id: int) -> IssueRecord | None: ...

    @abstractmethod
    def create_issue(self, data: IssueCreate) -> IssueRecord: ...

    @abstractmethod
    def update_issue(self, issue_id: int, data: IssueUpdate) -> IssueRecord | None: ...

    # Function blocks

    @abstractmethod
    def get_project_function_blocks(self, project_id: int) -> list[FunctionBlockRecord]: ...

    @abstractmethod
    def create_function_block(self, data: FunctionBlockCreate) -> FunctionBlockRecord: ...

    # LLM fixes

    @abstractmethod
    def get_project_llm_fixes(self, project_id: int) -> list[LlmFixRecord]: ...

    @abstractmethod
    def get_llm_fix(self, fix_id: int) -> LlmFixRecord | None: ...

    @abstractmethod
    def create_llm_fix(self, data: LlmFixCreate) -> LlmFixRecord: ...

    @abstractmethod
    def update_llm_fix(self, fix_id: int, data: LlmFixUpdate) -> LlmFixRecord | None: ...

    # Git commits

    @abstractmethod
    def get_project_git_commits(self, project_id: int) -> list[GitCommitRecord]: ...

    @abstractmethod
    def create_git_commit(self, data: GitCommitCreate) -> GitCommitRecord: ...

    # Deployments

    @abstractmethod
    def get_project_deployments(self, project_id: int) -> list[DeploymentRecord]: ...

    @abstractmethod
    def create_deployment(self, data: DeploymentCreate) -> DeploymentRecord: ...

    @abstractmethod
    def update_deployment(
        self, deployment_id: int, data: DeploymentUpdate
    ) -> DeploymentRecord | None: ...

    # History

    @abstractmethod
    def get_project_history(self, project_id: int) -> list[HistoryRecord]:
        """Return history rows for a project, newest first."""

    @abstractmethod
    def get_all_history(self) -> list[HistoryRecord]:
        """Return every history row, newest first."""

    @abstractmethod
    def create_history(self, data: HistoryCreate) -> HistoryRecord: ...

    def close(self) -> None:
        """Release any resources held by the store.

        Default is a no-op so callers can always call close() safely.
        """
