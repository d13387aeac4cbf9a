# filmorate/database/models/__init__.py

from filmorate.database.core.main import Base
from filmorate.database.models.lookup import (
    Genre,
    Rating,
)
from filmorate.database.models.user import (
    User,
    Friendship,
)
from filmorate.database.models.film import (
    Film,
    Like,
    FilmGenre,
)

__all__ = [
    "Base",
    "Genre",
    "Rating",
    "User",
    "Friendship",
    "Film",
    "Like",
    "FilmGenre",
]
