# filmorate/services/users/service.py
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from filmorate.common.logging import get_logger
from filmorate.domain.entities.user import User
from filmorate.domain.enums import FriendshipStatus
from filmorate.domain.errors import ValidationFailure
from filmorate.domain.policies.validation import validate_user
from filmorate.domain.ports.storage import UserStorePort

logger = get_logger()


class UserService:
    """
    User CRUD plus the social graph.

    Friendship policy: adding a friend is one-directional and confirmed
    immediately. `add_friend(a, b)` puts b into a's relation with status
    `confirmed` and leaves b's relation alone; `remove_friend` likewise only
    drops the a -> b edge.

    Every operation resolves all referenced users before mutating anything,
    so a NotFound leaves the stored relations untouched.
    """

    def __init__(self, users: UserStorePort) -> None:
        self.users = users

    # ---------- CRUD ----------

    def list(self) -> List[User]:
        return self.users.list()

    def get(self, user_id: int) -> User:
        return self.users.get_by_id(user_id)

    def create(self, candidate: User) -> User:
        return self.users.create(candidate)

    def update(self, record: User) -> User:
        """
        Full replace of the user's fields. The request body never carries the
        friend relation, so the stored one is kept.
        """
        validate_user(record)
        current = self.users.get_by_id(record.id) if record.id is not None else None
        friends = dict(current.friends) if current is not None else {}
        return self.users.update(replace(record, friends=friends))

    # ---------- social graph ----------

    def _resolve(self, ids: Iterable[int]) -> List[User]:
        return [self.users.get_by_id(i) for i in sorted(ids)]

    def add_friend(self, user_id: int, other_id: int) -> List[User]:
        user = self.users.get_by_id(user_id)
        self.users.get_by_id(other_id)
        if user_id == other_id:
            raise ValidationFailure("user.friends", f"user {user_id} cannot be their own friend")

        user.add_friend(other_id, FriendshipStatus.confirmed)
        self.users.update(user)
        logger.info("User %s added %s as a friend", user_id, other_id)
        return self.list_friends(user_id)

    def remove_friend(self, user_id: int, other_id: int) -> None:
        user = self.users.get_by_id(user_id)
        self.users.get_by_id(other_id)
        if other_id not in user.friends:
            return
        user.remove_friend(other_id)
        self.users.update(user)
        logger.info("User %s removed %s from friends", user_id, other_id)

    def list_friends(self, user_id: int) -> List[User]:
        user = self.users.get_by_id(user_id)
        return self._resolve(user.friend_ids())

    def common_friends(self, user_id: int, other_id: int) -> List[User]:
        user = self.users.get_by_id(user_id)
        other = self.users.get_by_id(other_id)
        common = user.friend_ids() & other.friend_ids()
        logger.debug("Users %s and %s have %d common friends", user_id, other_id, len(common))
        return self._resolve(common)
