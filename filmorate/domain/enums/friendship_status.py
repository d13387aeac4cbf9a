from __future__ import annotations
from enum import StrEnum

class FriendshipStatus(StrEnum):
    requested = "requested"
    confirmed = "confirmed"
