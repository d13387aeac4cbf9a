# filmorate/domain/reference.py
"""
Reference data shipped with the service. The initial migration inserts the
same rows; the in-memory backing and test databases seed from here.
"""
from __future__ import annotations

from typing import Tuple

from filmorate.domain.entities.lookup import Genre, Rating

DEFAULT_GENRES: Tuple[Genre, ...] = (
    Genre(1, "Comedy"),
    Genre(2, "Drama"),
    Genre(3, "Animation"),
    Genre(4, "Thriller"),
    Genre(5, "Documentary"),
    Genre(6, "Action"),
)

DEFAULT_RATINGS: Tuple[Rating, ...] = (
    Rating(1, "G"),
    Rating(2, "PG"),
    Rating(3, "PG-13"),
    Rating(4, "R"),
    Rating(5, "NC-17"),
)
