# filmorate/domain/entities/user.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Dict, Optional, Set

from filmorate.domain.enums import FriendshipStatus


@dataclass
class User:
    """
    Core domain entity for a registered user.

    The friend relation maps a neighbor's id to the status of the edge
    *from this user's side*. Edges are one-directional: adding B to A's
    relation says nothing about B's relation.

    Field constraints (email, login, birthday) are not checked here; a
    candidate must be constructible so the store can reject it with a
    ValidationFailure (see filmorate.domain.policies.validation).
    """
    id: Optional[int] = None
    email: str = ""
    login: str = ""
    name: Optional[str] = None
    birthday: Optional[date] = None
    friends: Dict[int, FriendshipStatus] = field(default_factory=dict)

    def friend_ids(self) -> Set[int]:
        return set(self.friends)

    def add_friend(self, friend_id: int, status: FriendshipStatus = FriendshipStatus.confirmed) -> None:
        self.friends[friend_id] = status

    def remove_friend(self, friend_id: int) -> None:
        self.friends.pop(friend_id, None)

    def as_dict(self):
        return asdict(self)
