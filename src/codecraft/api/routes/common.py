"""Helpers shared by the per-resource routers."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def parse_project_payload(
    model: type[PayloadT], body: dict[str, Any], project_id: int, label: str
) -> PayloadT:
    """Validate a child record body, tagging it with the project from the path.

    A ``project_id`` in the body is overridden by the path parameter.

    Raises:
        HTTPException: If the body does not match ``model`` (400).
    """
    try:
        return model.model_validate({**body, "project_id": project_id})
    except ValidationError as exc:
        logger.warning("Rejected %s payload for project %d: %s", label, project_id, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} data",
        ) from exc


def not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
