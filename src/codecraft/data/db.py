"""SQLAlchemy engine and session handling for the ``sql`` storage backend.

The engine is created lazily from ``DB_URL`` (falling back to a
``codecraft.db`` SQLite file at the repository root) and the dashboard
tables are created on first use. ``dispose_engine`` drops the cached
engine so a changed ``DB_URL`` takes effect on the next access.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for the dashboard ORM tables."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    """Return ``DB_URL`` or the default SQLite file URL."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    db_path = Path(__file__).resolve().parents[3] / "codecraft.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        database_url = get_database_url()
        connect_args: dict[str, Any] = {}
        if database_url.startswith("sqlite"):
            # Request handlers run on a thread pool.
            connect_args["check_same_thread"] = False
        _engine = create_engine(database_url, echo=False, connect_args=connect_args)
        logger.debug("Created database engine for %s", _engine.url.render_as_string())
        _create_tables(_engine)
    return _engine


def _create_tables(engine: Engine) -> None:
    # Registers every table on Base.metadata.
    from codecraft.data.models import (  # noqa: F401
        deployment,
        function_block,
        git_commit,
        history,
        issue,
        llm_fix,
        project,
        user,
    )

    Base.metadata.create_all(bind=engine)


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=_get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal


def init_db() -> None:
    """Create the engine and the dashboard tables if they do not exist yet."""
    _get_engine()


def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
