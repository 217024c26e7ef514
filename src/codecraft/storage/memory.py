"""MemStorage: process-local store backed by dictionaries.

All record kinds share a single id counter, so an id is unique across the
whole store. Records handed to callers are copies; mutating them does not
change stored state.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import UTC, datetime
from typing import TypeVar

from pydantic import BaseModel

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
from codecraft.services.sample_data import NEXT_ID_AFTER_SEED, build_sample_data
from codecraft.storage.base import Storage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(UTC)


def _by_project(records: dict[int, RecordT], project_id: int) -> list[RecordT]:
    # Callers hold the store lock.
    return [r.model_copy(deep=True) for r in records.values() if r.project_id == project_id]


class MemStorage(Storage):
    """In-memory storage. Contents are lost when the process exits.

    Every read and write of the tables holds one re-entrant lock.
    """

    def __init__(self, seed_sample_data: bool = True) -> None:
        self._lock = threading.RLock()
        self._users: dict[str, UserRecord] = {}
        self._projects: dict[int, ProjectRecord] = {}
        self._issues: dict[int, IssueRecord] = {}
        self._function_blocks: dict[int, FunctionBlockRecord] = {}
        self._llm_fixes: dict[int, LlmFixRecord] = {}
        self._git_commits: dict[int, GitCommitRecord] = {}
        self._deployments: dict[int, DeploymentRecord] = {}
        self._history: dict[int, HistoryRecord] = {}
        self._next_id = 1

        if seed_sample_data:
            self._seed()

    def _seed(self) -> None:
        sample = build_sample_data()
        for project in sample.projects:
            self._projects[project.id] = project
        for issue in sample.issues:
            self._issues[issue.id] = issue
        for fix in sample.llm_fixes:
            self._llm_fixes[fix.id] = fix
        self._next_id = NEXT_ID_AFTER_SEED
        logger.debug(
            "Seeded %d projects, %d issues, %d fixes",
            len(sample.projects),
            len(sample.issues),
            len(sample.llm_fixes),
        )

    def _allocate_id(self) -> int:
        with self._lock:
            new_id = self._next_id
            self._next_id += 1
            return new_id

    # Users

    def get_user(self, user_id: str) -> UserRecord | None:
        with self._lock:
            user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user.model_copy()
        return None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        user = UserRecord(id=str(uuid.uuid4()), username=username, password_hash=password_hash)
        with self._lock:
            self._users[user.id] = user
        return user.model_copy()

    # Projects

    def get_projects(self) -> list[ProjectRecord]:
        with self._lock:
            projects = sorted(self._projects.values(), key=lambda p: p.id)
        return [p.model_copy() for p in projects]

    def get_project(self, project_id: int) -> ProjectRecord | None:
        with self._lock:
            project = self._projects.get(project_id)
        return project.model_copy() if project else None

    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        now = _now()
        project = ProjectRecord(
            id=self._allocate_id(), created_at=now, updated_at=now, **data.model_dump()
        )
        with self._lock:
            self._projects[project.id] = project
        return project.model_copy()

    def update_project(self, project_id: int, data: ProjectUpdate) -> ProjectRecord | None:
        with self._lock:
            existing = self._projects.get(project_id)
            if existing is None:
                return None
            changes = data.model_dump(exclude_unset=True)
            changes["updated_at"] = _now()
            updated = existing.model_copy(update=changes)
            self._projects[project_id] = updated
            return updated.model_copy()

    def delete_project(self, project_id: int) -> bool:
        with self._lock:
            if self._projects.pop(project_id, None) is None:
                return False
            for table in (
                self._issues,
                self._function_blocks,
                self._llm_fixes,
                self._git_commits,
                self._deployments,
                self._history,
            ):
                for record_id in [k for k, v in table.items() if v.project_id == project_id]:
                    del table[record_id]
            return True

    # Issues

    def get_project_issues(self, project_id: int) -> list[IssueRecord]:
        with self._lock:
            return _by_project(self._issues, project_id)

    def get_issue(self, issue_id: int) -> IssueRecord | None:
        with self._lock:
            issue = self._issues.get(issue_id)
        return issue.model_copy(deep=True) if issue else None

    def create_issue(self, data: IssueCreate) -> IssueRecord:
        issue = IssueRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._issues[issue.id] = issue
        return issue.model_copy(deep=True)

    def update_issue(self, issue_id: int, data: IssueUpdate) -> IssueRecord | None:
        with self._lock:
            existing = self._issues.get(issue_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=data.model_dump(exclude_unset=True), deep=True)
            self._issues[issue_id] = updated
            return updated.model_copy(deep=True)

    # Function blocks

    def get_project_function_blocks(self, project_id: int) -> list[FunctionBlockRecord]:
        with self._lock:
            return _by_project(self._function_blocks, project_id)

    def create_function_block(self, data: FunctionBlockCreate) -> FunctionBlockRecord:
        block = FunctionBlockRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._function_blocks[block.id] = block
        return block.model_copy()

    # LLM fixes

    def get_project_llm_fixes(self, project_id: int) -> list[LlmFixRecord]:
        with self._lock:
            return _by_project(self._llm_fixes, project_id)

    def get_llm_fix(self, fix_id: int) -> LlmFixRecord | None:
        with self._lock:
            fix = self._llm_fixes.get(fix_id)
        return fix.model_copy() if fix else None

    def create_llm_fix(self, data: LlmFixCreate) -> LlmFixRecord:
        fix = LlmFixRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._llm_fixes[fix.id] = fix
        return fix.model_copy()

    def update_llm_fix(self, fix_id: int, data: LlmFixUpdate) -> LlmFixRecord | None:
        with self._lock:
            existing = self._llm_fixes.get(fix_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=data.model_dump(exclude_unset=True))
            self._llm_fixes[fix_id] = updated
            return updated.model_copy()

    # Git commits

    def get_project_git_commits(self, project_id: int) -> list[GitCommitRecord]:
        with self._lock:
            return _by_project(self._git_commits, project_id)

    def create_git_commit(self, data: GitCommitCreate) -> GitCommitRecord:
        commit = GitCommitRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._git_commits[commit.id] = commit
        return commit.model_copy()

    # Deployments

    def get_project_deployments(self, project_id: int) -> list[DeploymentRecord]:
        with self._lock:
            return _by_project(self._deployments, project_id)

    def create_deployment(self, data: DeploymentCreate) -> DeploymentRecord:
        deployment = DeploymentRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._deployments[deployment.id] = deployment
        return deployment.model_copy()

    def update_deployment(
        self, deployment_id: int, data: DeploymentUpdate
    ) -> DeploymentRecord | None:
        with self._lock:
            existing = self._deployments.get(deployment_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=data.model_dump(exclude_unset=True))
            self._deployments[deployment_id] = updated
            return updated.model_copy()

    # History

    def get_project_history(self, project_id: int) -> list[HistoryRecord]:
        with self._lock:
            rows = _by_project(self._history, project_id)
        return sorted(rows, key=lambda r: r.id, reverse=True)

    def get_all_history(self) -> list[HistoryRecord]:
        with self._lock:
            rows = [r.model_copy(deep=True) for r in self._history.values()]
        return sorted(rows, key=lambda r: r.id, reverse=True)

    def create_history(self, data: HistoryCreate) -> HistoryRecord:
        entry = HistoryRecord(id=self._allocate_id(), created_at=_now(), **data.model_dump())
        with self._lock:
            self._history[entry.id] = entry
        return entry.model_copy(deep=True)
