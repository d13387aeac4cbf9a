import pytest
from pydantic import ValidationError

from filmorate.common import settings as s
from filmorate.common.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    # ensure a clean cache per test
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)

    cfg = Settings(_env_file=None)
    assert cfg.storage_backend == "database"
    assert cfg.popular_default_count == 10
    assert cfg.api.port == 8080
    assert cfg.api.prefix == ""
    assert cfg.database_url.startswith("postgresql+psycopg://")
    assert cfg.db.is_sqlite is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "Memory")
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("USE_TESTCONTAINERS", "yes")

    cfg = get_settings()
    assert cfg.storage_backend == "memory"
    assert cfg.app_env == "test"
    assert cfg.use_testcontainers is True
    # cached
    assert get_settings() is cfg


def test_database_url_override():
    cfg = Settings(_env_file=None, db={"DATABASE_URL": "sqlite+pysqlite:///./filmorate.db"})
    assert cfg.database_url == "sqlite+pysqlite:///./filmorate.db"
    assert cfg.db.is_sqlite is True


def test_unknown_storage_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db:5432/films")
    cfg = Settings(_env_file=None)
    assert cfg.database_url == "postgresql+psycopg://u:p@db:5432/films"
    # the shared default sub-config is left alone
    assert Settings.model_fields["db"].default.url is None
