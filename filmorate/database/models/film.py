# filmorate/database/models/film.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import (
    CheckConstraint, Date, ForeignKey, Integer, String, Index,
)
from sqlalchemy.orm import Mapped, mapped_column

from filmorate.database.core.main import Base
from filmorate.database.core.service_object import ServiceObject


class Film(ServiceObject, Base):
    __tablename__ = "films"
    __table_args__ = (
        CheckConstraint("duration >= 0", name="duration_non_negative"),
        Index("ix_films_rating_id", "rating_id"),
        {"sqlite_autoincrement": True},
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    rating_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("ratings.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Film id={self.id} name={self.name!r}>"


class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (
        Index("ix_likes_user_id", "user_id"),
    )

    film_id: Mapped[int] = mapped_column(
        ForeignKey("films.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )


class FilmGenre(Base):
    """Association table Film <-> Genre (M:M)."""
    __tablename__ = "film_genres"
    __table_args__ = (
        Index("ix_film_genres_genre_id", "genre_id"),
    )

    film_id: Mapped[int] = mapped_column(
        ForeignKey("films.id", ondelete="CASCADE"),
        primary_key=True,
    )
    genre_id: Mapped[int] = mapped_column(
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    )
