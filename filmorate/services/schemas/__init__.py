from filmorate.services.schemas.users import (
    UserRead,
    UserCreate,
    UserUpdate,
)
from filmorate.services.schemas.films import (
    FilmRead,
    FilmCreate,
    FilmUpdate,
)
from filmorate.services.schemas.lookups import (
    GenreRead,
    RatingRead,
    GenreRef,
    RatingRef,
)
__all__ = [
    "UserRead",
    "UserCreate",
    "UserUpdate",
    "FilmRead",
    "FilmCreate",
    "FilmUpdate",
    "GenreRead",
    "RatingRead",
    "GenreRef",
    "RatingRef",
]
