# filmorate/services/mappers/film.py
from __future__ import annotations

from filmorate.domain.entities.film import Film
from filmorate.domain.entities.lookup import Genre, Rating
from filmorate.services.schemas.films import FilmBase, FilmCreate, FilmRead, FilmUpdate
from filmorate.services.schemas.lookups import GenreRef, RatingRef


def _to_domain(s: FilmBase, film_id: int | None) -> Film:
    return Film(
        id=film_id,
        name=s.name or "",
        description=s.description or "",
        release_date=s.release_date,
        duration=s.duration,
        # names are filled in by the service from the lookup stores
        genres=[Genre(id=g.id) for g in s.genres],
        mpa=Rating(id=s.mpa.id) if s.mpa is not None else None,
    )


def to_domain_from_create(s: FilmCreate) -> Film:
    return _to_domain(s, None)


def to_domain_from_update(s: FilmUpdate) -> Film:
    return _to_domain(s, s.id)


def to_read_schema(film: Film) -> FilmRead:
    return FilmRead(
        id=film.id,
        name=film.name,
        description=film.description,
        release_date=film.release_date,
        duration=film.duration,
        mpa=RatingRef(id=film.mpa.id, name=film.mpa.name) if film.mpa else None,
        genres=[GenreRef(id=g.id, name=g.name) for g in film.genres],
        likes=sorted(film.likes),
    )
