# filmorate/database/models/user.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import (
    Date, ForeignKey, String, Enum as SAEnum, text, Index, CheckConstraint
)
from sqlalchemy.orm import Mapped, mapped_column

from filmorate.database.core.main import Base
from filmorate.database.core.service_object import ServiceObject
from filmorate.domain.enums import FriendshipStatus


# =======================
# Users
# =======================
class User(ServiceObject, Base):
    __tablename__ = "users"
    __table_args__ = (
        Index("ix_users_login", "login"),
        {"sqlite_autoincrement": True},
    )

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    login: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255))
    birthday: Mapped[Optional[date]] = mapped_column(Date)

    def __repr__(self) -> str:
        return f"<User id={self.id} login={self.login!r}>"


class Friendship(Base):
    """
    One row per directed edge: `friend_id` is in `user_id`'s friend relation.
    The inverse edge, if any, is a separate row.
    """
    __tablename__ = "friendships"
    __table_args__ = (
        CheckConstraint("user_id <> friend_id", name="no_self_friendship"),
        Index("ix_friendships_friend_id", "friend_id"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    friend_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    status: Mapped[FriendshipStatus] = mapped_column(
        SAEnum(FriendshipStatus, name="friendship_status"),
        nullable=False,
        server_default=text("'confirmed'"),
    )
