from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class GenreRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class RatingRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class GenreRef(BaseModel):
    """Reference by id inside a film body; name is informational."""
    id: int
    name: Optional[str] = None


class RatingRef(BaseModel):
    id: int
    name: Optional[str] = None
