# filmorate/services/stores.py
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from filmorate.database.repos.film_repo import SqlAlchemyFilmRepo
from filmorate.database.repos.in_memory import (
    InMemoryFilmRepo, InMemoryGenreRepo, InMemoryRatingRepo, InMemoryUserRepo,
)
from filmorate.database.repos.lookup_repo import SqlAlchemyGenreRepo, SqlAlchemyRatingRepo
from filmorate.database.repos.user_repo import SqlAlchemyUserRepo
from filmorate.domain.ports.storage import (
    FilmStorePort, GenreLookupPort, RatingLookupPort, UserStorePort,
)


@dataclass
class Stores:
    """
    The set of stores one unit of work talks to. Services receive this
    bundle; which backing sits behind it is decided when it is built.
    """
    users: UserStorePort
    films: FilmStorePort
    genres: GenreLookupPort
    ratings: RatingLookupPort


def memory_stores() -> Stores:
    """Fresh volatile stores. Keep the returned object for as long as the data should live."""
    return Stores(
        users=InMemoryUserRepo(),
        films=InMemoryFilmRepo(),
        genres=InMemoryGenreRepo(),
        ratings=InMemoryRatingRepo(),
    )


def sql_stores(db: Session) -> Stores:
    """Durable stores sharing one Session (and therefore one transaction)."""
    return Stores(
        users=SqlAlchemyUserRepo(db),
        films=SqlAlchemyFilmRepo(db),
        genres=SqlAlchemyGenreRepo(db),
        ratings=SqlAlchemyRatingRepo(db),
    )
