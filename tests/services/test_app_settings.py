# tests/services/test_app_settings.py
from __future__ import annotations

from starlette.testclient import TestClient

from filmorate.common.settings import Settings
from filmorate.services.api.app import create_app


def _client(**overrides) -> TestClient:
    cfg = Settings(_env_file=None, storage_backend="memory", **overrides)
    return TestClient(create_app(cfg))


def test_api_prefix_comes_from_app_settings():
    with _client(api={"prefix": "/api"}) as client:
        assert client.get("/api/films").status_code == 200
        assert client.get("/api/genres/1").json() == {"id": 1, "name": "Comedy"}
        assert client.get("/films").status_code == 404


def test_popular_default_count_comes_from_app_settings():
    with _client(popular_default_count=2) as client:
        for i in range(3):
            r = client.post("/films", json={"name": f"F{i}", "releaseDate": "2000-01-01", "duration": 90})
            assert r.status_code == 201, r.text
        assert len(client.get("/films/popular").json()) == 2
        assert len(client.get("/films/popular", params={"count": 3}).json()) == 3


def test_healthz_reports_app_settings():
    with _client(app_name="filmorate-test", app_env="test") as client:
        body = client.get("/healthz").json()
    assert body == {"ok": True, "app": "filmorate-test", "env": "test", "storage": "memory"}
