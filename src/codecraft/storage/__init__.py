"""Storage backends and the process-wide default instance."""

from __future__ import annotations

import logging

from codecraft.config import Settings, get_settings
from codecraft.storage.base import Storage
from codecraft.storage.memory import MemStorage
from codecraft.storage.sql import SqlStorage

logger = logging.getLogger(__name__)

__all__ = [
    "MemStorage",
    "SqlStorage",
    "Storage",
    "build_storage",
    "get_default_storage",
    "reset_default_storage",
]

_default_storage: Storage | None = None


def build_storage(settings: Settings) -> Storage:
    """Create the backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "sql":
        storage: Storage = SqlStorage(seed_sample_data=settings.seed_sample_data)
    else:
        storage = MemStorage(seed_sample_data=settings.seed_sample_data)
    logger.info("Using %s storage backend", settings.storage_backend)
    return storage


def get_default_storage() -> Storage:
    """Return the shared storage, creating it from the environment on first use."""
    global _default_storage
    if _default_storage is None:
        _default_storage = build_storage(get_settings())
    return _default_storage


def reset_default_storage() -> None:
    """Close and forget the shared storage."""
    global _default_storage
    if _default_storage is not None:
        _default_storage.close()
    _default_storage = None
