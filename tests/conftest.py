from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import codecraft.data.db as app_db
from codecraft.api.dependencies import get_storage
from codecraft.api.main import app
from codecraft.data.db import init_db
from codecraft.storage import MemStorage, SqlStorage, Storage


@pytest.fixture
def sql_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for SQL storage tests."""
    db_path = tmp_path / "codecraft.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.dispose_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.dispose_engine()


@pytest.fixture
def mem_storage() -> Iterator[MemStorage]:
    """Serve API requests from a fresh, seeded in-memory store."""
    storage = MemStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
def client(mem_storage: MemStorage) -> TestClient:
    """Create a test client backed by ``mem_storage``."""
    return TestClient(app)


@pytest.fixture(params=["memory", "sql"])
def backend_client(request: pytest.FixtureRequest) -> Iterator[tuple[TestClient, Storage]]:
    """A test client served by a seeded store of each backend."""
    if request.param == "memory":
        store: Storage = MemStorage()
    else:
        request.getfixturevalue("sql_db")
        store = SqlStorage()
    app.dependency_overrides[get_storage] = lambda: store
    yield TestClient(app), store
    app.dependency_overrides.pop(get_storage, None)
    store.close()


@pytest.fixture(params=["memory", "sql"])
def storage(request: pytest.FixtureRequest) -> Iterator[Storage]:
    """An empty store of each backend."""
    if request.param == "memory":
        store: Storage = MemStorage(seed_sample_data=False)
    else:
        request.getfixturevalue("sql_db")
        store = SqlStorage(seed_sample_data=False)
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def seeded_storage(request: pytest.FixtureRequest) -> Iterator[Storage]:
    """A store of each backend loaded with the sample projects."""
    if request.param == "memory":
        store: Storage = MemStorage()
    else:
        request.getfixturevalue("sql_db")
        store = SqlStorage()
    yield store
    store.close()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add the mem_storage fixture to tests in API test files."""
    for item in items:
        # Check if test file name contains "api" (case-insensitive)
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("mem_storage"))
