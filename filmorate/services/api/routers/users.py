# filmorate/services/api/routers/users.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from filmorate.services.api.deps import get_user_service
from filmorate.services.api.errors import domain_errors
from filmorate.services.mappers.user import (
    to_domain_from_create, to_domain_from_update, to_read_schema,
)
from filmorate.services.schemas.users import UserCreate, UserRead, UserUpdate
from filmorate.services.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


# ---- CRUD ----

@router.get("", response_model=List[UserRead])
def list_users(svc: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [to_read_schema(u) for u in svc.list()]


@router.post("", response_model=UserRead, status_code=HTTPStatus.CREATED)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)) -> UserRead:
    with domain_errors():
        return to_read_schema(svc.create(to_domain_from_create(payload)))


@router.put("", response_model=UserRead)
def update_user(payload: UserUpdate, svc: UserService = Depends(get_user_service)) -> UserRead:
    with domain_errors():
        return to_read_schema(svc.update(to_domain_from_update(payload)))


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int = Path(...), svc: UserService = Depends(get_user_service)) -> UserRead:
    with domain_errors():
        return to_read_schema(svc.get(user_id))


# ---- Friends ----

@router.put("/{user_id}/friends/{friend_id}", response_model=List[UserRead])
def add_friend(
    user_id: int,
    friend_id: int,
    svc: UserService = Depends(get_user_service),
) -> List[UserRead]:
    with domain_errors():
        return [to_read_schema(u) for u in svc.add_friend(user_id, friend_id)]


@router.delete("/{user_id}/friends/{friend_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_friend(
    user_id: int,
    friend_id: int,
    svc: UserService = Depends(get_user_service),
) -> None:
    with domain_errors():
        svc.remove_friend(user_id, friend_id)


@router.get("/{user_id}/friends", response_model=List[UserRead])
def list_friends(user_id: int, svc: UserService = Depends(get_user_service)) -> List[UserRead]:
    with domain_errors():
        return [to_read_schema(u) for u in svc.list_friends(user_id)]


@router.get("/{user_id}/friends/common/{other_id}", response_model=List[UserRead])
def common_friends(
    user_id: int,
    other_id: int,
    svc: UserService = Depends(get_user_service),
) -> List[UserRead]:
    with domain_errors():
        return [to_read_schema(u) for u in svc.common_friends(user_id, other_id)]
