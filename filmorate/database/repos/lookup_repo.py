# filmorate/database/repos/lookup_repo.py
from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from filmorate.common.logging import get_logger
from filmorate.database.models.lookup import Genre as DBGenre, Rating as DBRating
from filmorate.database.repos._mapping import to_domain_genre, to_domain_rating
from filmorate.domain.entities.lookup import Genre, Rating
from filmorate.domain.errors import NotFound
from filmorate.domain.reference import DEFAULT_GENRES, DEFAULT_RATINGS

logger = get_logger()


class SqlAlchemyGenreRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> List[Genre]:
        rows = self.db.execute(select(DBGenre).order_by(DBGenre.id.asc())).scalars().all()
        return [to_domain_genre(r) for r in rows]

    def get_by_id(self, genre_id: int) -> Genre:
        row = self.db.get(DBGenre, genre_id)
        if row is None:
            logger.info("Genre %s not found", genre_id)
            raise NotFound("Genre", genre_id)
        return to_domain_genre(row)


class SqlAlchemyRatingRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> List[Rating]:
        rows = self.db.execute(select(DBRating).order_by(DBRating.id.asc())).scalars().all()
        return [to_domain_rating(r) for r in rows]

    def get_by_id(self, rating_id: int) -> Rating:
        row = self.db.get(DBRating, rating_id)
        if row is None:
            logger.info("Rating %s not found", rating_id)
            raise NotFound("Rating", rating_id)
        return to_domain_rating(row)


def seed_lookups(db: Session) -> None:
    """
    Insert the default genres and ratings that are missing. Migrations do
    this for real databases; tests on metadata.create_all() call it directly.
    """
    for g in DEFAULT_GENRES:
        if db.get(DBGenre, g.id) is None:
            db.add(DBGenre(id=g.id, name=g.name))
    for r in DEFAULT_RATINGS:
        if db.get(DBRating, r.id) is None:
            db.add(DBRating(id=r.id, name=r.name))
    db.flush()
