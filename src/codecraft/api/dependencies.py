"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status

from codecraft.models import ProjectRecord
from codecraft.storage import Storage, get_default_storage


def get_storage() -> Storage:
    """Return the storage backend for the current request.

    Tests replace this through ``app.dependency_overrides``.
    """
    return get_default_storage()


StorageDep = Annotated[Storage, Depends(get_storage)]


def get_project_or_404(project_id: int, storage: StorageDep) -> ProjectRecord:
    """Resolve the ``project_id`` path parameter to a stored project.

    Raises:
        HTTPException: If the project does not exist (404).
    """
    project = storage.get_project(project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return project


ProjectDep = Annotated[ProjectRecord, Depends(get_project_or_404)]
