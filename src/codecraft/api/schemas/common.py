"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement for actions that return no record."""

    message: str = Field(description="Human readable outcome")


class ErrorResponse(BaseModel):
    """Body returned with 4xx/5xx responses."""

    detail: str = Field(description="What went wrong")
    errors: list[dict[str, Any]] | None = Field(
        default=None, description="Field level problems, present on request validation failures"
    )
