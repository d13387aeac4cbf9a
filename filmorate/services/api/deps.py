# filmorate/services/api/deps.py
from __future__ import annotations
from typing import Iterator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from filmorate.common.settings import Settings, get_settings
from filmorate.database.core.main import get_session_factory
from filmorate.services.films.service import FilmService
from filmorate.services.lookups.service import GenreService, RatingService
from filmorate.services.stores import Stores, sql_stores
from filmorate.services.users.service import UserService


def get_app_settings(request: Request) -> Settings:
    """The Settings the running app was built with (create_app stores them on app.state)."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_stores(request: Request) -> Iterator[Stores]:
    """
    Request-scoped stores.

    With the in-memory backing the app owns one Stores object for its whole
    lifetime (app.state.stores). With the database backing every request
    gets its own Session inside `Session.begin()`: COMMIT on normal exit,
    ROLLBACK if an exception bubbles out, so multi-statement updates are
    never half-applied.
    """
    shared: Optional[Stores] = getattr(request.app.state, "stores", None)
    if shared is not None:
        yield shared
        return

    factory = getattr(request.app.state, "session_factory", None) or get_session_factory()
    db: Session = factory()
    try:
        with db.begin():
            yield sql_stores(db)
    finally:
        db.close()


def get_user_service(stores: Stores = Depends(get_stores)) -> UserService:
    return UserService(stores.users)


def get_film_service(stores: Stores = Depends(get_stores)) -> FilmService:
    return FilmService(
        films=stores.films,
        users=stores.users,
        genres=stores.genres,
        ratings=stores.ratings,
    )


def get_genre_service(stores: Stores = Depends(get_stores)) -> GenreService:
    return GenreService(stores.genres)


def get_rating_service(stores: Stores = Depends(get_stores)) -> RatingService:
    return RatingService(stores.ratings)
