# filmorate/database/models/lookup.py
from __future__ import annotations

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from filmorate.database.core.main import Base


class Genre(Base):
    """Reference table, seeded by the initial migration."""
    __tablename__ = "genres"
    __table_args__ = (
        UniqueConstraint("name", name="uq_genres_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        return f"<Genre id={self.id} name={self.name!r}>"


class Rating(Base):
    """MPA rating categories, seeded by the initial migration."""
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("name", name="uq_ratings_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(16), nullable=False)

    def __repr__(self) -> str:
        return f"<Rating id={self.id} name={self.name!r}>"
