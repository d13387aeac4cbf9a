# tests/services/test_films_api.py
from __future__ import annotations

from typing import Any, Dict


# ---------------------------- helpers -----------------------------------------

def _film_body(name: str, **kw) -> Dict[str, Any]:
    body = {
        "name": name,
        "description": "adipisicing",
        "releaseDate": "1967-03-25",
        "duration": 100,
        "mpa": {"id": 1},
    }
    body.update(kw)
    return body


def _create_film(client, name: str, **kw) -> Dict[str, Any]:
    r = client.post("/films", json=_film_body(name, **kw))
    assert r.status_code == 201, r.text
    return r.json()


def _create_user(client, login: str) -> Dict[str, Any]:
    r = client.post("/users", json={"email": f"{login}@mail.test", "login": login, "birthday": "1980-01-01"})
    assert r.status_code == 201, r.text
    return r.json()


# ---------------------------- CRUD --------------------------------------------

def test_create_and_get_film(client):
    created = _create_film(client, "nisi eiusmod", genres=[{"id": 2}, {"id": 1}])
    assert created["releaseDate"] == "1967-03-25"
    assert created["mpa"] == {"id": 1, "name": "G"}
    assert created["genres"] == [{"id": 1, "name": "Comedy"}, {"id": 2, "name": "Drama"}]
    assert created["likes"] == []

    r = client.get(f"/films/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_snake_case_release_date_is_accepted(client):
    body = _film_body("snake")
    body["release_date"] = body.pop("releaseDate")
    r = client.post("/films", json=body)
    assert r.status_code == 201
    assert r.json()["releaseDate"] == "1967-03-25"


def test_create_film_validation_errors_are_400(client):
    for body in (
        _film_body(""),
        _film_body("x", description="d" * 201),
        _film_body("x", releaseDate="1890-03-25"),
        _film_body("x", duration=-200),
    ):
        r = client.post("/films", json=body)
        assert r.status_code == 400, body
    assert client.get("/films").json() == []


def test_description_of_exactly_200_chars_is_accepted(client):
    _create_film(client, "edge", description="d" * 200, releaseDate="1895-12-28")


def test_unknown_mpa_or_genre_is_404(client):
    assert client.post("/films", json=_film_body("x", mpa={"id": 999})).status_code == 404
    assert client.post("/films", json=_film_body("x", genres=[{"id": 999}])).status_code == 404


def test_update_film(client):
    f = _create_film(client, "Film")
    body = _film_body("Film Updated", id=f["id"], description="New film update decription",
                      releaseDate="1989-04-17", duration=190, mpa={"id": 5})
    r = client.put("/films", json=body)
    assert r.status_code == 200, r.text
    got = r.json()
    assert got["name"] == "Film Updated"
    assert got["duration"] == 190
    assert got["mpa"] == {"id": 5, "name": "NC-17"}
    assert client.get(f"/films/{f['id']}").json() == got


def test_update_with_negative_duration_is_400(client):
    f = _create_film(client, "Film", releaseDate="1896-12-28", duration=120)
    r = client.put("/films", json=_film_body("Film", id=f["id"], releaseDate="1896-12-28", duration=-1))
    assert r.status_code == 400
    assert client.get(f"/films/{f['id']}").json()["duration"] == 120


def test_update_unknown_film_is_404(client):
    r = client.put("/films", json=_film_body("ghost", id=9999))
    assert r.status_code == 404


def test_get_unknown_film_is_404(client):
    assert client.get("/films/9999").status_code == 404


# ---------------------------- likes & popular ---------------------------------

def test_like_and_unlike(client):
    f = _create_film(client, "Film")
    u = _create_user(client, "fan")

    r = client.put(f"/films/{f['id']}/like/{u['id']}")
    assert r.status_code == 204
    assert client.get(f"/films/{f['id']}").json()["likes"] == [u["id"]]

    r = client.delete(f"/films/{f['id']}/like/{u['id']}")
    assert r.status_code == 204
    assert client.get(f"/films/{f['id']}").json()["likes"] == []


def test_like_with_unknown_user_or_film_is_404(client):
    f = _create_film(client, "Film")
    u = _create_user(client, "fan")
    assert client.put(f"/films/{f['id']}/like/999").status_code == 404
    assert client.put(f"/films/999/like/{u['id']}").status_code == 404
    assert client.delete(f"/films/{f['id']}/like/999").status_code == 404


def test_popular(client):
    films = [_create_film(client, f"F{i}") for i in range(3)]
    users = [_create_user(client, f"u{i}") for i in range(3)]
    like_plan = {films[0]["id"]: 3, films[1]["id"]: 1, films[2]["id"]: 2}
    for film_id, n in like_plan.items():
        for u in users[:n]:
            client.put(f"/films/{film_id}/like/{u['id']}")

    r = client.get("/films/popular", params={"count": 2})
    assert r.status_code == 200
    assert [f["id"] for f in r.json()] == [films[0]["id"], films[2]["id"]]

    r = client.get("/films/popular")
    assert [f["id"] for f in r.json()] == [films[0]["id"], films[2]["id"], films[1]["id"]]


def test_popular_default_count_is_ten(client):
    for i in range(12):
        _create_film(client, f"F{i}")
    assert len(client.get("/films/popular").json()) == 10


def test_popular_non_positive_count_is_empty(client):
    _create_film(client, "F")
    assert client.get("/films/popular", params={"count": 0}).json() == []
    assert client.get("/films/popular", params={"count": -1}).json() == []
