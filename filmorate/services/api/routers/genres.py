from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from filmorate.services.api.deps import get_genre_service
from filmorate.services.api.errors import domain_errors
from filmorate.services.lookups.service import GenreService
from filmorate.services.schemas.lookups import GenreRead

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("", response_model=List[GenreRead])
def list_genres(svc: GenreService = Depends(get_genre_service)) -> List[GenreRead]:
    return [GenreRead.model_validate(g) for g in svc.list()]


@router.get("/{genre_id}", response_model=GenreRead)
def get_genre(genre_id: int, svc: GenreService = Depends(get_genre_service)) -> GenreRead:
    with domain_errors():
        return GenreRead.model_validate(svc.get(genre_id))
