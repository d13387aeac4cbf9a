# filmorate/database/repos/user_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.orm import Session

from filmorate.common.logging import get_logger
from filmorate.database.core.transaction import transactional
from filmorate.database.models.user import User as DBUser, Friendship as DBFriendship
from filmorate.database.repos._mapping import to_domain_user
from filmorate.domain.entities.user import User
from filmorate.domain.enums import FriendshipStatus
from filmorate.domain.errors import NotFound
from filmorate.domain.policies.validation import normalize_user, validate_user

logger = get_logger()


class SqlAlchemyUserRepo:
    """
    Durable user store (satisfies UserStorePort).

    The friend relation lives in `friendships`, one row per directed edge.
    Reads rebuild it with one query; updates delete every edge of the user
    and re-insert the current relation. The caller owns commit/rollback.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------- reads --------

    def _friends_of(self, user_id: int) -> Dict[int, FriendshipStatus]:
        stmt = (
            select(DBFriendship.friend_id, DBFriendship.status)
            .where(DBFriendship.user_id == user_id)
            .order_by(DBFriendship.friend_id.asc())
        )
        return {fid: FriendshipStatus(status) for fid, status in self.db.execute(stmt).all()}

    def _batch_friends(self, user_ids: Iterable[int]) -> Dict[int, Dict[int, FriendshipStatus]]:
        ids = list(user_ids)
        if not ids:
            return {}
        stmt = (
            select(DBFriendship.user_id, DBFriendship.friend_id, DBFriendship.status)
            .where(DBFriendship.user_id.in_(ids))
            .order_by(DBFriendship.user_id.asc(), DBFriendship.friend_id.asc())
        )
        out: Dict[int, Dict[int, FriendshipStatus]] = {}
        for uid, fid, status in self.db.execute(stmt).all():
            out.setdefault(uid, {})[fid] = FriendshipStatus(status)
        return out

    def list(self) -> List[User]:
        rows = self.db.execute(select(DBUser).order_by(DBUser.id.asc())).scalars().all()
        friends = self._batch_friends(r.id for r in rows)
        logger.debug("Users in store: %d", len(rows))
        return [to_domain_user(r, friends.get(r.id, {})) for r in rows]

    def get_by_id(self, user_id: int) -> User:
        row = self.db.get(DBUser, user_id)
        if row is None:
            logger.info("User %s not found", user_id)
            raise NotFound("User", user_id)
        return to_domain_user(row, self._friends_of(user_id))

    # -------- writes --------

    def _write_friends(self, user_id: int, friends: Dict[int, FriendshipStatus]) -> None:
        self.db.add_all(
            DBFriendship(user_id=user_id, friend_id=fid, status=FriendshipStatus(status))
            for fid, status in friends.items()
        )

    def create(self, candidate: User) -> User:
        validate_user(candidate)
        user = normalize_user(candidate)
        with transactional(self.db):
            row = DBUser(
                email=user.email,
                login=user.login,
                name=user.name,
                birthday=user.birthday,
            )
            self.db.add(row)
            self.db.flush()  # ensure id
            self._write_friends(row.id, user.friends)
            self.db.flush()
        logger.info("Created user %s (%s)", row.id, row.login)
        return self.get_by_id(row.id)

    def update(self, record: User) -> User:
        validate_user(record)
        row = self.db.get(DBUser, record.id) if record.id is not None else None
        if row is None:
            logger.info("Cannot update user %s: not found", record.id)
            raise NotFound("User", record.id)

        with transactional(self.db):
            row.email = record.email
            row.login = record.login
            row.name = record.name
            row.birthday = record.birthday

            self.db.execute(sa_delete(DBFriendship).where(DBFriendship.user_id == row.id))
            self._write_friends(row.id, record.friends)
            self.db.flush()
        logger.info("Updated user %s", row.id)
        return self.get_by_id(row.id)
