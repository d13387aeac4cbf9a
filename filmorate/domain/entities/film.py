# filmorate/domain/entities/film.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import date
from typing import List, Optional, Set

from filmorate.domain.entities.lookup import Genre, Rating


@dataclass
class Film:
    """
    Core domain entity for a film.

    `likes` holds the ids of users who liked the film; a user can like a
    film at most once, so it is a set. `genres` keeps references in id
    order and `mpa` is the optional rating category.
    """
    id: Optional[int] = None
    name: str = ""
    description: str = ""
    release_date: Optional[date] = None
    duration: int = 0  # minutes
    likes: Set[int] = field(default_factory=set)
    genres: List[Genre] = field(default_factory=list)
    mpa: Optional[Rating] = None

    @property
    def like_count(self) -> int:
        return len(self.likes)

    def add_like(self, user_id: int) -> None:
        self.likes.add(user_id)

    def remove_like(self, user_id: int) -> None:
        self.likes.discard(user_id)

    def genre_ids(self) -> List[int]:
        return [g.id for g in self.genres]

    def as_dict(self):
        return asdict(self)
