# filmorate/domain/entities/lookup.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Genre:
    """Static reference row. Seeded by migrations, never created through the API."""
    id: int
    name: str = ""


@dataclass(frozen=True)
class Rating:
    """
    MPA rating category (G, PG, PG-13, R, NC-17). Like Genre, read-only from
    the service's point of view.
    """
    id: int
    name: str = ""
