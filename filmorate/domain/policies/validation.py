# filmorate/domain/policies/validation.py
"""
Field constraints for users and films, checked by every store before a
record is persisted. Checks run in a fixed order and stop at the first
violation, which is reported as a ValidationFailure naming the rule.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from filmorate.domain.entities.film import Film
from filmorate.domain.entities.user import User
from filmorate.domain.errors import ValidationFailure

# First public film screening (Lumiere brothers, Paris)
EARLIEST_RELEASE_DATE = date(1895, 12, 28)
MAX_DESCRIPTION_LENGTH = 200


def _blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()


def validate_film(film: Film) -> None:
    if _blank(film.name):
        raise ValidationFailure("film.name", "film name must not be empty")
    if len(film.description or "") > MAX_DESCRIPTION_LENGTH:
        raise ValidationFailure(
            "film.description",
            f"description of {film.name!r} is longer than {MAX_DESCRIPTION_LENGTH} characters",
        )
    if film.release_date is None or film.release_date < EARLIEST_RELEASE_DATE:
        raise ValidationFailure(
            "film.release_date",
            f"release date of {film.name!r} is before {EARLIEST_RELEASE_DATE.isoformat()}",
        )
    if film.duration is None or film.duration < 0:
        raise ValidationFailure("film.duration", f"duration of {film.name!r} is negative")


def validate_user(user: User, today: Optional[date] = None) -> None:
    today = today or date.today()
    if _blank(user.email) or "@" not in user.email:
        raise ValidationFailure("user.email", "email is empty or has no '@'")
    if _blank(user.login) or any(ch.isspace() for ch in user.login):
        raise ValidationFailure("user.login", f"login of {user.email} is empty or contains whitespace")
    if user.birthday is not None and user.birthday > today:
        raise ValidationFailure("user.birthday", f"birthday of {user.login} is in the future")
    if user.id is not None and user.id in user.friends:
        raise ValidationFailure("user.friends", f"user {user.id} cannot be their own friend")


def normalize_user(user: User) -> User:
    """Return a copy with name defaulted to login when blank."""
    if _blank(user.name):
        return replace(user, name=user.login, friends=dict(user.friends))
    return replace(user, friends=dict(user.friends))
