from __future__ import annotations
from typing import List, Protocol

from filmorate.domain.entities.film import Film
from filmorate.domain.entities.lookup import Genre, Rating
from filmorate.domain.entities.user import User


class UserStorePort(Protocol):
    def list(self) -> List[User]: ...
    def create(self, candidate: User) -> User: ...
    def update(self, record: User) -> User: ...
    def get_by_id(self, user_id: int) -> User: ...


class FilmStorePort(Protocol):
    def list(self) -> List[Film]: ...
    def create(self, candidate: Film) -> Film: ...
    def update(self, record: Film) -> Film: ...
    def get_by_id(self, film_id: int) -> Film: ...


class GenreLookupPort(Protocol):
    def list(self) -> List[Genre]: ...
    def get_by_id(self, genre_id: int) -> Genre: ...


class RatingLookupPort(Protocol):
    def list(self) -> List[Rating]: ...
    def get_by_id(self, rating_id: int) -> Rating: ...
