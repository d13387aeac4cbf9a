# filmorate/database/repos/film_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Set

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.orm import Session

from filmorate.common.logging import get_logger
from filmorate.database.core.transaction import transactional
from filmorate.database.models.film import Film as DBFilm, Like as DBLike, FilmGenre as DBFilmGenre
from filmorate.database.models.lookup import Genre as DBGenre, Rating as DBRating
from filmorate.database.repos._mapping import to_domain_film
from filmorate.domain.entities.film import Film
from filmorate.domain.errors import NotFound
from filmorate.domain.policies.validation import validate_film

logger = get_logger()


class SqlAlchemyFilmRepo:
    """
    Durable film store (satisfies FilmStorePort).

    Likes and genres are link tables. Reads rebuild both sets; updates
    rewrite them wholesale (delete, then insert) in the same transaction as
    the row update so nobody observes a half-written film.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------- reads --------

    def _likes_for(self, film_ids: Iterable[int]) -> Dict[int, Set[int]]:
        ids = list(film_ids)
        if not ids:
            return {}
        stmt = select(DBLike.film_id, DBLike.user_id).where(DBLike.film_id.in_(ids))
        out: Dict[int, Set[int]] = {}
        for fid, uid in self.db.execute(stmt).all():
            out.setdefault(fid, set()).add(uid)
        return out

    def _genres_for(self, film_ids: Iterable[int]) -> Dict[int, List[DBGenre]]:
        ids = list(film_ids)
        if not ids:
            return {}
        stmt = (
            select(DBFilmGenre.film_id, DBGenre)
            .join(DBGenre, DBGenre.id == DBFilmGenre.genre_id)
            .where(DBFilmGenre.film_id.in_(ids))
            .order_by(DBFilmGenre.film_id.asc(), DBGenre.id.asc())
        )
        out: Dict[int, List[DBGenre]] = {}
        for fid, genre in self.db.execute(stmt).all():
            out.setdefault(fid, []).append(genre)
        return out

    def _to_domain(self, rows: List[DBFilm]) -> List[Film]:
        ids = [r.id for r in rows]
        likes = self._likes_for(ids)
        genres = self._genres_for(ids)
        ratings = {r.id: r for r in self.db.execute(select(DBRating)).scalars().all()}
        return [
            to_domain_film(
                r,
                likes.get(r.id, set()),
                genres.get(r.id, []),
                ratings.get(r.rating_id) if r.rating_id is not None else None,
            )
            for r in rows
        ]

    def list(self) -> List[Film]:
        rows = self.db.execute(select(DBFilm).order_by(DBFilm.id.asc())).scalars().all()
        logger.debug("Films in store: %d", len(rows))
        return self._to_domain(list(rows))

    def get_by_id(self, film_id: int) -> Film:
        row = self.db.get(DBFilm, film_id)
        if row is None:
            logger.info("Film %s not found", film_id)
            raise NotFound("Film", film_id)
        return self._to_domain([row])[0]

    # -------- writes --------

    def _write_links(self, film: Film, film_id: int) -> None:
        self.db.add_all(DBLike(film_id=film_id, user_id=uid) for uid in sorted(film.likes))
        seen: Set[int] = set()
        for gid in film.genre_ids():
            if gid in seen:
                continue
            seen.add(gid)
            self.db.add(DBFilmGenre(film_id=film_id, genre_id=gid))

    def create(self, candidate: Film) -> Film:
        validate_film(candidate)
        with transactional(self.db):
            row = DBFilm(
                name=candidate.name,
                description=candidate.description or "",
                release_date=candidate.release_date,
                duration=candidate.duration,
                rating_id=candidate.mpa.id if candidate.mpa else None,
            )
            self.db.add(row)
            self.db.flush()  # ensure id
            self._write_links(candidate, row.id)
            self.db.flush()
        logger.info("Created film %s (%s)", row.id, row.name)
        return self.get_by_id(row.id)

    def update(self, record: Film) -> Film:
        validate_film(record)
        row = self.db.get(DBFilm, record.id) if record.id is not None else None
        if row is None:
            logger.info("Cannot update film %s: not found", record.id)
            raise NotFound("Film", record.id)

        with transactional(self.db):
            row.name = record.name
            row.description = record.description or ""
            row.release_date = record.release_date
            row.duration = record.duration
            row.rating_id = record.mpa.id if record.mpa else None

            self.db.execute(sa_delete(DBLike).where(DBLike.film_id == row.id))
            self.db.execute(sa_delete(DBFilmGenre).where(DBFilmGenre.film_id == row.id))
            self._write_links(record, row.id)
            self.db.flush()
        logger.info("Updated film %s", row.id)
        return self.get_by_id(row.id)
