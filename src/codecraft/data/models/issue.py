"""ORM model for vulnerability findings reported against a project."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from codecraft.data.db import Base


class Issue(Base):
    """A single finding located in a file of a project.

    Attributes:
        id: Auto-incrementing primary key.
        project_id: Owning project. Not a foreign key constraint; orphans are
            removed by the storage layer when a project is deleted.
        file_path: Path of the affected file relative to the project root.
        line_start: First affected line.
        line_end: Last affected line.
        severity: CRITICAL, HIGH, MEDIUM or LOW.
        vuln_type: Category label such as "SQL Injection".
        message: Human readable description of the finding.
        code_snippet: Offending source excerpt, if captured.
        status: PENDING, FIXED or IGNORED.
        tags: JSON list of free-form labels.
        created_at: UTC timestamp of when the finding was recorded.
    """

    __tablename__ = "issues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    file_path: Mapped[str] = mapped_column(String, nullable=False)
    line_start: Mapped[int] = mapped_column(Integer, nullable=False)
    line_end: Mapped[int] = mapped_column(Integer, nullable=False)
    severity: Mapped[str] = mapped_column(String(16), nullable=False)
    vuln_type: Mapped[str] = mapped_column(String, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    code_snippet: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
