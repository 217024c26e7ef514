"""Pydantic schemas for simulated workflow endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from codecraft.constants import Environment


class ScanRequest(BaseModel):
    """Options chosen on the new-scan form. Every field is optional."""

    scan_type: str | None = Field(None, description="e.g. full, quick, custom")
    selected_directories: list[str] | None = Field(None, description="Directories to scan")
    exclusions: list[str] | None = Field(None, description="Glob patterns to skip")
    repo_url: str | None = Field(None, description="Repository to scan")
    git_username: str | None = None
    git_password: str | None = Field(None, description="Accepted but never stored")
    language: str | None = Field(None, description="Primary language of the project")


class ScanPrepareResponse(BaseModel):
    directories: list[str]


class ScanResponse(BaseModel):
    scan_id: int
    status: str
    start_datetime: datetime


class ScanCancelResponse(BaseModel):
    scan_id: int
    status: str


class MergeFixRequest(BaseModel):
    fix_id: int | None = Field(None, description="Fix to mark as applied")


class DeployRequest(BaseModel):
    environment: Environment | None = Field(None, description="Defaults to STAGING")


class DiffResponse(BaseModel):
    """Before/after code for a single fix."""

    original_code: str | None
    fixed_code: str | None
    function_name: str
