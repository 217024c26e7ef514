"""SqlStorage: SQLAlchemy-backed store.

Uses the engine and session scope from ``codecraft.data.db``; the database
is selected with the ``DB_URL`` environment variable. Ids are allocated per
table by the database.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from codecraft.data.db import Base, get_session, init_db
from codecraft.data.models import (
    Deployment,
    FunctionBlock,
    GitCommit,
    HistoryEntry,
    Issue,
    LlmFix,
    Project,
    User,
)
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
from codecraft.services.sample_data import build_sample_data
from codecraft.storage.base import Storage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Tables holding records tagged with a project_id
_PROJECT_CHILDREN = (Issue, FunctionBlock, LlmFix, GitCommit, Deployment, HistoryEntry)


def _to_record(record_type: type[RecordT], row: Base) -> RecordT:
    return record_type.model_validate(row)


def _insert(session: Session, row: Base, record_type: type[RecordT]) -> RecordT:
    session.add(row)
    session.flush()
    session.refresh(row)
    return _to_record(record_type, row)


def _apply_updates(
    session: Session,
    model: type[Base],
    record_id: int,
    changes: dict[str, Any],
    record_type: type[RecordT],
) -> RecordT | None:
    row = session.get(model, record_id)
    if row is None:
        return None
    for field, value in changes.items():
        setattr(row, field, value)
    session.flush()
    session.refresh(row)
    return _to_record(record_type, row)


def _list_for_project(
    model: type[Base], record_type: type[RecordT], project_id: int, newest_first: bool = False
) -> list[RecordT]:
    order = model.id.desc() if newest_first else model.id.asc()
    with get_session() as session:
        rows = session.scalars(select(model).where(model.project_id == project_id).order_by(order))
        return [_to_record(record_type, row) for row in rows]


class SqlStorage(Storage):
    """Relational storage through the SQLAlchemy ORM."""

    def __init__(self, seed_sample_data: bool = True) -> None:
        init_db()
        if seed_sample_data:
            self._seed_if_empty()

    def _seed_if_empty(self) -> None:
        with get_session() as session:
            if session.scalars(select(Project.id).limit(1)).first() is not None:
                return
            sample = build_sample_data()
            session.add_all(Project(**p.model_dump()) for p in sample.projects)
            session.add_all(Issue(**i.model_dump()) for i in sample.issues)
            session.add_all(LlmFix(**f.model_dump()) for f in sample.llm_fixes)
        logger.info("Seeded empty database with sample projects")

    # Users

    def get_user(self, user_id: str) -> UserRecord | None:
        with get_session() as session:
            user = session.get(User, user_id)
            return _to_record(UserRecord, user) if user else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with get_session() as session:
            user = session.scalars(select(User).where(User.username == username)).first()
            return _to_record(UserRecord, user) if user else None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        with get_session() as session:
            row = User(id=str(uuid.uuid4()), username=username, password_hash=password_hash)
            return _insert(session, row, UserRecord)

    # Projects

    def get_projects(self) -> list[ProjectRecord]:
        with get_session() as session:
            rows = session.scalars(select(Project).order_by(Project.id))
            return [_to_record(ProjectRecord, row) for row in rows]

    def get_project(self, project_id: int) -> ProjectRecord | None:
        with get_session() as session:
            project = session.get(Project, project_id)
            return _to_record(ProjectRecord, project) if project else None

    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        with get_session() as session:
            return _insert(session, Project(**data.model_dump()), ProjectRecord)

    def update_project(self, project_id: int, data: ProjectUpdate) -> ProjectRecord | None:
        changes = data.model_dump(exclude_unset=True)
        changes["updated_at"] = datetime.now(UTC)
        with get_session() as session:
            return _apply_updates(session, Project, project_id, changes, ProjectRecord)

    def delete_project(self, project_id: int) -> bool:
        with get_session() as session:
            project = session.get(Project, project_id)
            if project is None:
                return False
            for model in _PROJECT_CHILDREN:
                session.execute(delete(model).where(model.project_id == project_id))
            session.delete(project)
            return True

    # Issues

    def get_project_issues(self, project_id: int) -> list[IssueRecord]:
        return _list_for_project(Issue, IssueRecord, project_id)

    def get_issue(self, issue_id: int) -> IssueRecord | None:
        with get_session() as session:
            issue = session.get(Issue, issue_id)
            return _to_record(IssueRecord, issue) if issue else None

    def create_issue(self, data: IssueCreate) -> IssueRecord:
        with get_session() as session:
            return _insert(session, Issue(**data.model_dump()), IssueRecord)

    def update_issue(self, issue_id: int, data: IssueUpdate) -> IssueRecord | None:
        with get_session() as session:
            return _apply_updates(
                session, Issue, issue_id, data.model_dump(exclude_unset=True), IssueRecord
            )

    # Function blocks

    def get_project_function_blocks(self, project_id: int) -> list[FunctionBlockRecord]:
        return _list_for_project(FunctionBlock, FunctionBlockRecord, project_id)

    def create_function_block(self, data: FunctionBlockCreate) -> FunctionBlockRecord:
        with get_session() as session:
            return _insert(session, FunctionBlock(**data.model_dump()), FunctionBlockRecord)

    # LLM fixes

    def get_project_llm_fixes(self, project_id: int) -> list[LlmFixRecord]:
        return _list_for_project(LlmFix, LlmFixRecord, project_id)

    def get_llm_fix(self, fix_id: int) -> LlmFixRecord | None:
        with get_session() as session:
            fix = session.get(LlmFix, fix_id)
            return _to_record(LlmFixRecord, fix) if fix else None

    def create_llm_fix(self, data: LlmFixCreate) -> LlmFixRecord:
        with get_session() as session:
            return _insert(session, LlmFix(**data.model_dump()), LlmFixRecord)

    def update_llm_fix(self, fix_id: int, data: LlmFixUpdate) -> LlmFixRecord | None:
        with get_session() as session:
            return _apply_updates(
                session, LlmFix, fix_id, data.model_dump(exclude_unset=True), LlmFixRecord
            )

    # Git commits

    def get_project_git_commits(self, project_id: int) -> list[GitCommitRecord]:
        return _list_for_project(GitCommit, GitCommitRecord, project_id)

    def create_git_commit(self, data: GitCommitCreate) -> GitCommitRecord:
        with get_session() as session:
            return _insert(session, GitCommit(**data.model_dump()), GitCommitRecord)

    # Deployments

    def get_project_deployments(self, project_id: int) -> list[DeploymentRecord]:
        return _list_for_project(Deployment, DeploymentRecord, project_id)

    def create_deployment(self, data: DeploymentCreate) -> DeploymentRecord:
        with get_session() as session:
            return _insert(session, Deployment(**data.model_dump()), DeploymentRecord)

    def update_deployment(
        self, deployment_id: int, data: DeploymentUpdate
    ) -> DeploymentRecord | None:
        with get_session() as session:
            return _apply_updates(
                session,
                Deployment,
                deployment_id,
                data.model_dump(exclude_unset=True),
                DeploymentRecord,
            )

    # History

    def get_project_history(self, project_id: int) -> list[HistoryRecord]:
        return _list_for_project(HistoryEntry, HistoryRecord, project_id, newest_first=True)

    def get_all_history(self) -> list[HistoryRecord]:
        with get_session() as session:
            rows = session.scalars(select(HistoryEntry).order_by(HistoryEntry.id.desc()))
            return [_to_record(HistoryRecord, row) for row in rows]

    def create_history(self, data: HistoryCreate) -> HistoryRecord:
        with get_session() as session:
            return _insert(session, HistoryEntry(**data.model_dump()), HistoryRecord)
