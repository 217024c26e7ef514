from __future__ import annotations

import pytest

from codecraft.config import ConfigError, Settings, get_settings
from codecraft.storage import MemStorage, SqlStorage, build_storage

_VARS = (
    "CODECRAFT_STORAGE",
    "CODECRAFT_SEED_SAMPLE_DATA",
    "CODECRAFT_LOG_LEVEL",
    "CODECRAFT_HOST",
    "CODECRAFT_PORT",
    "CODECRAFT_CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert get_settings() == Settings()


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODECRAFT_STORAGE", "SQL")
    monkeypatch.setenv("CODECRAFT_SEED_SAMPLE_DATA", "no")
    monkeypatch.setenv("CODECRAFT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CODECRAFT_PORT", "9000")
    monkeypatch.setenv("CODECRAFT_CORS_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173")

    settings = get_settings()

    assert settings.storage_backend == "sql"
    assert settings.seed_sample_data is False
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000
    assert settings.cors_origins == ("http://localhost:5173", "http://127.0.0.1:5173")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CODECRAFT_STORAGE", "redis"),
        ("CODECRAFT_SEED_SAMPLE_DATA", "maybe"),
        ("CODECRAFT_LOG_LEVEL", "LOUD"),
        ("CODECRAFT_PORT", "http"),
        ("CODECRAFT_PORT", "70000"),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        get_settings()


def test_build_memory_storage() -> None:
    storage = build_storage(Settings(seed_sample_data=False))
    assert isinstance(storage, MemStorage)
    assert storage.get_projects() == []


def test_build_sql_storage(sql_db: None) -> None:
    storage = build_storage(Settings(storage_backend="sql"))
    assert isinstance(storage, SqlStorage)
    assert len(storage.get_projects()) == 3
