# filmorate/services/mappers/user.py
from __future__ import annotations

from filmorate.domain.entities.user import User
from filmorate.services.schemas.users import UserCreate, UserRead, UserUpdate


def to_domain_from_create(s: UserCreate) -> User:
    return User(
        email=s.email,
        login=s.login,
        name=s.name,
        birthday=s.birthday,
    )


def to_domain_from_update(s: UserUpdate) -> User:
    return User(
        id=s.id,
        email=s.email,
        login=s.login,
        name=s.name,
        birthday=s.birthday,
    )


def to_read_schema(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        login=user.login,
        name=user.name,
        birthday=user.birthday,
        friends=sorted(user.friends),
    )
