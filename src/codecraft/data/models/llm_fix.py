"""ORM model for suggested remediations."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from codecraft.data.db import Base


class LlmFix(Base):
    """Suggested fix for a function, optionally linked to an issue.

    Attributes:
        id: Auto-incrementing primary key.
        project_id: Owning project.
        issue_id: Issue the fix addresses, if any.
        function_name: Name of the rewritten function.
        llm_response: Explanation returned alongside the fix.
        original_code: Source before the fix.
        fixed_code: Source after the fix.
        status: FIX_READY, APPLIED or REJECTED.
        created_at: UTC timestamp of when the fix was recorded.
    """

    __tablename__ = "llm_fixes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    issue_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    function_name: Mapped[str] = mapped_column(String, nullable=False)
    llm_response: Mapped[str] = mapped_column(Text, nullable=False)
    original_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    fixed_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
