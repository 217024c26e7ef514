"""Pydantic schemas for dashboard statistics."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    total_projects: int
    critical_issues: int = Field(description="Open findings with CRITICAL severity")
    fixes_applied: int = Field(description="Fixes in APPLIED status")
    avg_fix_rate: int = Field(description="Mean fix percentage across projects")
