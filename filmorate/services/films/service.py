# filmorate/services/films/service.py
from __future__ import annotations

from dataclasses import replace
from typing import List

from filmorate.common.logging import get_logger
from filmorate.domain.entities.film import Film
from filmorate.domain.policies.popularity import top_films
from filmorate.domain.policies.validation import validate_film
from filmorate.domain.ports.storage import (
    FilmStorePort, GenreLookupPort, RatingLookupPort, UserStorePort,
)

logger = get_logger()


class FilmService:
    def __init__(
        self,
        films: FilmStorePort,
        users: UserStorePort,
        genres: GenreLookupPort,
        ratings: RatingLookupPort,
    ) -> None:
        self.films = films
        self.users = users
        self.genres = genres
        self.ratings = ratings

    def _resolve_references(self, film: Film) -> Film:
        """
        Swap genre / MPA references for the stored reference rows. Unknown ids
        raise NotFound. Genres come back de-duplicated in id order.
        """
        genre_ids = sorted(set(film.genre_ids()))
        genres = [self.genres.get_by_id(gid) for gid in genre_ids]
        mpa = self.ratings.get_by_id(film.mpa.id) if film.mpa is not None else None
        return replace(film, genres=genres, mpa=mpa, likes=set(film.likes))

    # ---------- CRUD ----------

    def list(self) -> List[Film]:
        return self.films.list()

    def get(self, film_id: int) -> Film:
        return self.films.get_by_id(film_id)

    def create(self, candidate: Film) -> Film:
        validate_film(candidate)
        return self.films.create(self._resolve_references(candidate))

    def update(self, record: Film) -> Film:
        """
        Full replace of the film's fields, genres and rating. Likes are only
        changed through add_like/remove_like, so the stored set is kept.
        """
        validate_film(record)
        resolved = self._resolve_references(record)
        current = self.films.get_by_id(record.id) if record.id is not None else None
        likes = set(current.likes) if current is not None else set()
        return self.films.update(replace(resolved, likes=likes))

    # ---------- likes ----------

    def add_like(self, film_id: int, user_id: int) -> None:
        film = self.films.get_by_id(film_id)
        self.users.get_by_id(user_id)
        film.add_like(user_id)
        self.films.update(film)
        logger.info("User %s liked film %s", user_id, film_id)

    def remove_like(self, film_id: int, user_id: int) -> None:
        film = self.films.get_by_id(film_id)
        self.users.get_by_id(user_id)
        film.remove_like(user_id)
        self.films.update(film)
        logger.info("User %s removed like from film %s", user_id, film_id)

    # ---------- ranking ----------

    def popular(self, count: int) -> List[Film]:
        return top_films(self.films.list(), count)
