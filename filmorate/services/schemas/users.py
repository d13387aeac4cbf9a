# filmorate/services/schemas/users.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Field constraints (email format, login whitespace, birthday in the past)
# are checked by the domain validation so the API answers 400 with the rule
# name; schemas only pin down types.

class UserBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = ""
    login: str = ""
    name: Optional[str] = None
    birthday: Optional[date] = None


class UserCreate(UserBase):
    # Accepted for wire compatibility, ignored: ids are assigned by the store
    id: Optional[int] = None


class UserUpdate(UserBase):
    id: int


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    friends: List[int] = Field(default_factory=list, description="Ids in this user's friend relation")
