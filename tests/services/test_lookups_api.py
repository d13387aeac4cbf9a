# tests/services/test_lookups_api.py
from __future__ import annotations


def test_genres(client):
    r = client.get("/genres")
    assert r.status_code == 200
    assert r.json()[0] == {"id": 1, "name": "Comedy"}
    assert len(r.json()) == 6

    assert client.get("/genres/3").json() == {"id": 3, "name": "Animation"}
    assert client.get("/genres/999").status_code == 404


def test_mpa(client):
    r = client.get("/mpa")
    assert r.status_code == 200
    assert [m["name"] for m in r.json()] == ["G", "PG", "PG-13", "R", "NC-17"]

    assert client.get("/mpa/3").json() == {"id": 3, "name": "PG-13"}
    assert client.get("/mpa/999").status_code == 404


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["app"] == "filmorate"
