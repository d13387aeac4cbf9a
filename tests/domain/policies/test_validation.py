import pytest
from datetime import date

from filmorate.domain.entities.film import Film
from filmorate.domain.entities.user import User
from filmorate.domain.enums import FriendshipStatus
from filmorate.domain.errors import ValidationFailure
from filmorate.domain.policies.validation import (
    EARLIEST_RELEASE_DATE,
    normalize_user,
    validate_film,
    validate_user,
)

TODAY = date(2024, 6, 1)


def _film(**kw) -> Film:
    base = dict(name="Film", description="d" * 50, release_date=date(1896, 12, 28), duration=120)
    base.update(kw)
    return Film(**base)


def _user(**kw) -> User:
    base = dict(email="a@x.com", login="a", name="A", birthday=date(1990, 1, 1))
    base.update(kw)
    return User(**base)


def test_valid_film_passes():
    validate_film(_film())


def test_film_boundaries_are_inclusive():
    validate_film(_film(description="x" * 200, release_date=EARLIEST_RELEASE_DATE, duration=0))


@pytest.mark.parametrize(
    "overrides,rule",
    [
        ({"name": ""}, "film.name"),
        ({"name": "   "}, "film.name"),
        ({"description": "x" * 201}, "film.description"),
        ({"release_date": date(1895, 12, 27)}, "film.release_date"),
        ({"release_date": None}, "film.release_date"),
        ({"duration": -1}, "film.duration"),
    ],
)
def test_film_rules(overrides, rule):
    with pytest.raises(ValidationFailure) as exc:
        validate_film(_film(**overrides))
    assert exc.value.rule == rule


def test_film_rules_short_circuit_in_order():
    bad = _film(name="", description="x" * 300, release_date=date(1800, 1, 1), duration=-5)
    with pytest.raises(ValidationFailure) as exc:
        validate_film(bad)
    assert exc.value.rule == "film.name"

    bad.name = "ok"
    with pytest.raises(ValidationFailure) as exc:
        validate_film(bad)
    assert exc.value.rule == "film.description"


def test_valid_user_passes():
    validate_user(_user(), today=TODAY)


def test_birthday_today_is_allowed():
    validate_user(_user(birthday=TODAY), today=TODAY)


@pytest.mark.parametrize(
    "overrides,rule",
    [
        ({"email": ""}, "user.email"),
        ({"email": "ax.com"}, "user.email"),
        ({"login": ""}, "user.login"),
        ({"login": "a b"}, "user.login"),
        ({"login": "a\tb"}, "user.login"),
        ({"birthday": date(2024, 6, 2)}, "user.birthday"),
    ],
)
def test_user_rules(overrides, rule):
    with pytest.raises(ValidationFailure) as exc:
        validate_user(_user(**overrides), today=TODAY)
    assert exc.value.rule == rule


def test_user_rules_short_circuit_in_order():
    with pytest.raises(ValidationFailure) as exc:
        validate_user(_user(email="nope", login="has space", birthday=date(2999, 1, 1)), today=TODAY)
    assert exc.value.rule == "user.email"


def test_user_cannot_be_own_friend():
    u = _user(id=7, friends={7: FriendshipStatus.confirmed})
    with pytest.raises(ValidationFailure) as exc:
        validate_user(u, today=TODAY)
    assert exc.value.rule == "user.friends"


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_normalize_defaults_name_to_login(blank):
    u = normalize_user(_user(name=blank, login="neo"))
    assert u.name == "neo"


def test_normalize_keeps_name_and_copies():
    original = _user(friends={2: FriendshipStatus.confirmed})
    u = normalize_user(original)
    assert u.name == "A"
    u.friends[3] = FriendshipStatus.requested
    assert 3 not in original.friends
