"""Pydantic schemas for user API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserInfoResponse(BaseModel):
    """Public view of a user. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str


class LoginRequest(BaseModel):
    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")


class LoginResponse(BaseModel):
    authenticated: bool
    username: str
