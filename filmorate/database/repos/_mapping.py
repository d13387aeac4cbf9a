# filmorate/database/repos/_mapping.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from filmorate.database.models.film import Film as DBFilm
from filmorate.database.models.lookup import Genre as DBGenre, Rating as DBRating
from filmorate.database.models.user import User as DBUser
from filmorate.domain.entities.film import Film as DomainFilm
from filmorate.domain.entities.lookup import Genre as DomainGenre, Rating as DomainRating
from filmorate.domain.entities.user import User as DomainUser
from filmorate.domain.enums import FriendshipStatus


def to_domain_genre(row: DBGenre) -> DomainGenre:
    return DomainGenre(id=row.id, name=row.name)


def to_domain_rating(row: DBRating) -> DomainRating:
    return DomainRating(id=row.id, name=row.name)


def to_domain_user(row: DBUser, friends: Dict[int, FriendshipStatus]) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        login=row.login,
        name=row.name,
        birthday=row.birthday,
        friends=dict(friends),
    )


def to_domain_film(
    row: DBFilm,
    likes: Iterable[int],
    genres: List[DBGenre],
    rating: Optional[DBRating],
) -> DomainFilm:
    return DomainFilm(
        id=row.id,
        name=row.name,
        description=row.description or "",
        release_date=row.release_date,
        duration=row.duration,
        likes=set(likes),
        genres=[to_domain_genre(g) for g in genres],
        mpa=to_domain_rating(rating) if rating is not None else None,
    )
