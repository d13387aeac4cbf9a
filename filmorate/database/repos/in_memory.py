# filmorate/database/repos/in_memory.py
"""
Volatile stores: plain dicts keyed by id, with the id counter living next to
the table. Everything is lost when the object goes away, so one instance is
created per process (or per test) and passed to whatever composes services.

Records are copied on the way in and on the way out. Callers mutate their
own copy and persist it through `update`, same as with the durable stores.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Dict, Iterable, List

from filmorate.common.logging import get_logger
from filmorate.domain.entities.film import Film
from filmorate.domain.entities.lookup import Genre, Rating
from filmorate.domain.entities.user import User
from filmorate.domain.errors import NotFound
from filmorate.domain.policies.validation import normalize_user, validate_film, validate_user
from filmorate.domain.reference import DEFAULT_GENRES, DEFAULT_RATINGS

logger = get_logger()


class InMemoryUserRepo:
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._last_id = 0

    def list(self) -> List[User]:
        logger.debug("Users in store: %d", len(self._users))
        return [deepcopy(u) for u in self._users.values()]

    def get_by_id(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            logger.info("User %s not found", user_id)
            raise NotFound("User", user_id)
        return deepcopy(user)

    def create(self, candidate: User) -> User:
        validate_user(candidate)
        user = normalize_user(candidate)
        self._last_id += 1
        user.id = self._last_id
        self._users[user.id] = deepcopy(user)
        logger.info("Created user %s (%s)", user.id, user.login)
        return user

    def update(self, record: User) -> User:
        validate_user(record)
        if record.id not in self._users:
            logger.info("Cannot update user %s: not found", record.id)
            raise NotFound("User", record.id)
        self._users[record.id] = deepcopy(record)
        logger.info("Updated user %s", record.id)
        return deepcopy(record)


class InMemoryFilmRepo:
    def __init__(self) -> None:
        self._films: Dict[int, Film] = {}
        self._last_id = 0

    def list(self) -> List[Film]:
        logger.debug("Films in store: %d", len(self._films))
        return [deepcopy(f) for f in self._films.values()]

    def get_by_id(self, film_id: int) -> Film:
        film = self._films.get(film_id)
        if film is None:
            logger.info("Film %s not found", film_id)
            raise NotFound("Film", film_id)
        return deepcopy(film)

    def create(self, candidate: Film) -> Film:
        validate_film(candidate)
        film = deepcopy(candidate)
        self._last_id += 1
        film.id = self._last_id
        self._films[film.id] = deepcopy(film)
        logger.info("Created film %s (%s)", film.id, film.name)
        return film

    def update(self, record: Film) -> Film:
        validate_film(record)
        if record.id not in self._films:
            logger.info("Cannot update film %s: not found", record.id)
            raise NotFound("Film", record.id)
        self._films[record.id] = deepcopy(record)
        logger.info("Updated film %s", record.id)
        return deepcopy(record)


class InMemoryGenreRepo:
    def __init__(self, genres: Iterable[Genre] = DEFAULT_GENRES) -> None:
        self._genres: Dict[int, Genre] = {g.id: g for g in genres}

    def list(self) -> List[Genre]:
        return sorted(self._genres.values(), key=lambda g: g.id)

    def get_by_id(self, genre_id: int) -> Genre:
        try:
            return self._genres[genre_id]
        except KeyError:
            raise NotFound("Genre", genre_id) from None


class InMemoryRatingRepo:
    def __init__(self, ratings: Iterable[Rating] = DEFAULT_RATINGS) -> None:
        self._ratings: Dict[int, Rating] = {r.id: r for r in ratings}

    def list(self) -> List[Rating]:
        return sorted(self._ratings.values(), key=lambda r: r.id)

    def get_by_id(self, rating_id: int) -> Rating:
        try:
            return self._ratings[rating_id]
        except KeyError:
            raise NotFound("Rating", rating_id) from None
