"""ORM model for the audit log of simulated actions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from codecraft.data.db import Base


class HistoryEntry(Base):
    """One audit row for a scan, fix, merge or deploy action.

    Attributes:
        id: Auto-incrementing primary key.
        project_id: Project the action was performed on.
        action_type: SCAN, FIX, DEPLOY or MERGE.
        action_data: JSON object with action parameters.
            Example: {"scan_type": "full", "language": "python"}
        status: Outcome label, e.g. COMPLETED or CANCELLED.
        created_at: UTC timestamp of when the action was recorded.
    """

    __tablename__ = "history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    action_type: Mapped[str] = mapped_column(String(16), nullable=False)
    action_data: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
