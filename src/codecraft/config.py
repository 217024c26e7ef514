"""Runtime configuration read from environment variables.

Variables:
- ``CODECRAFT_STORAGE``: storage backend, ``memory`` (default) or ``sql``
- ``DB_URL``: SQLAlchemy URL used by the ``sql`` backend (see ``data.db``)
- ``CODECRAFT_SEED_SAMPLE_DATA``: seed demo projects on startup (default true)
- ``CODECRAFT_LOG_LEVEL``: root log level (default ``INFO``)
- ``CODECRAFT_HOST`` / ``CODECRAFT_PORT``: dev server bind address
- ``CODECRAFT_CORS_ORIGINS``: comma-separated allowed origins (default ``*``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

STORAGE_BACKENDS = ("memory", "sql")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved application settings."""

    storage_backend: str = "memory"
    seed_sample_data: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: tuple[str, ...] = ("*",)


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_port(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"{name} must be between 1 and 65535, got {port}")
    return port


def get_settings() -> Settings:
    """Build settings from the current environment.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    backend = os.getenv("CODECRAFT_STORAGE", "memory").strip().lower() or "memory"
    if backend not in STORAGE_BACKENDS:
        raise ConfigError(
            f"CODECRAFT_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {backend!r}"
        )

    log_level = os.getenv("CODECRAFT_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"CODECRAFT_LOG_LEVEL is not a known level: {log_level!r}")

    origins_raw = os.getenv("CODECRAFT_CORS_ORIGINS", "*")
    origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip()) or ("*",)

    return Settings(
        storage_backend=backend,
        seed_sample_data=_parse_bool("CODECRAFT_SEED_SAMPLE_DATA", True),
        log_level=log_level,
        host=os.getenv("CODECRAFT_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_parse_port("CODECRAFT_PORT", 8000),
        cors_origins=origins,
    )


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("codecraft").setLevel(level)
