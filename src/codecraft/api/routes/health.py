"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from codecraft.api.dependencies import StorageDep

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(storage: StorageDep) -> dict[str, str]:
    """Return the current status of the API and the active storage backend."""
    return {"status": "healthy", "storage": type(storage).__name__}
