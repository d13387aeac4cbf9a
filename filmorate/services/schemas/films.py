# filmorate/services/schemas/films.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from filmorate.services.schemas.lookups import GenreRef, RatingRef


class FilmBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = Field(default=None, alias="releaseDate")
    duration: int = Field(0, description="Minutes")
    mpa: Optional[RatingRef] = None
    genres: List[GenreRef] = Field(default_factory=list)


class FilmCreate(FilmBase):
    # Accepted for wire compatibility, ignored: ids are assigned by the store
    id: Optional[int] = None


class FilmUpdate(FilmBase):
    id: int


class FilmRead(FilmBase):
    id: int
    likes: List[int] = Field(default_factory=list, description="Ids of users who liked the film")
