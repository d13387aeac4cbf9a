from filmorate.domain.enums.friendship_status import FriendshipStatus
__all__ = [
    "FriendshipStatus",
]
