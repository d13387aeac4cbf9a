# filmorate/services/api/routers/films.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from filmorate.common.settings import Settings
from filmorate.services.api.deps import get_app_settings, get_film_service
from filmorate.services.api.errors import domain_errors
from filmorate.services.films.service import FilmService
from filmorate.services.mappers.film import (
    to_domain_from_create, to_domain_from_update, to_read_schema,
)
from filmorate.services.schemas.films import FilmCreate, FilmRead, FilmUpdate

router = APIRouter(prefix="/films", tags=["films"])


# Declared before /{film_id} so "popular" is not parsed as an id
@router.get("/popular", response_model=List[FilmRead])
def popular_films(
    count: Optional[int] = Query(None, description="How many films to return; non-positive gives []"),
    svc: FilmService = Depends(get_film_service),
    cfg: Settings = Depends(get_app_settings),
) -> List[FilmRead]:
    n = cfg.popular_default_count if count is None else count
    return [to_read_schema(f) for f in svc.popular(n)]


@router.get("", response_model=List[FilmRead])
def list_films(svc: FilmService = Depends(get_film_service)) -> List[FilmRead]:
    return [to_read_schema(f) for f in svc.list()]


@router.post("", response_model=FilmRead, status_code=HTTPStatus.CREATED)
def create_film(payload: FilmCreate, svc: FilmService = Depends(get_film_service)) -> FilmRead:
    with domain_errors():
        return to_read_schema(svc.create(to_domain_from_create(payload)))


@router.put("", response_model=FilmRead)
def update_film(payload: FilmUpdate, svc: FilmService = Depends(get_film_service)) -> FilmRead:
    with domain_errors():
        return to_read_schema(svc.update(to_domain_from_update(payload)))


@router.get("/{film_id}", response_model=FilmRead)
def get_film(film_id: int = Path(...), svc: FilmService = Depends(get_film_service)) -> FilmRead:
    with domain_errors():
        return to_read_schema(svc.get(film_id))


# ---- Likes ----

@router.put("/{film_id}/like/{user_id}", status_code=HTTPStatus.NO_CONTENT)
def add_like(film_id: int, user_id: int, svc: FilmService = Depends(get_film_service)) -> None:
    with domain_errors():
        svc.add_like(film_id, user_id)


@router.delete("/{film_id}/like/{user_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_like(film_id: int, user_id: int, svc: FilmService = Depends(get_film_service)) -> None:
    with domain_errors():
        svc.remove_like(film_id, user_id)
