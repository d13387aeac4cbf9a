# filmorate/services/lookups/service.py
from __future__ import annotations

from typing import List

from filmorate.domain.entities.lookup import Genre, Rating
from filmorate.domain.ports.storage import GenreLookupPort, RatingLookupPort


class GenreService:
    def __init__(self, genres: GenreLookupPort) -> None:
        self.genres = genres

    def list(self) -> List[Genre]:
        return self.genres.list()

    def get(self, genre_id: int) -> Genre:
        return self.genres.get_by_id(genre_id)


class RatingService:
    def __init__(self, ratings: RatingLookupPort) -> None:
        self.ratings = ratings

    def list(self) -> List[Rating]:
        return self.ratings.list()

    def get(self, rating_id: int) -> Rating:
        return self.ratings.get_by_id(rating_id)
