from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from filmorate.services.api.deps import get_rating_service
from filmorate.services.api.errors import domain_errors
from filmorate.services.lookups.service import RatingService
from filmorate.services.schemas.lookups import RatingRead

router = APIRouter(prefix="/mpa", tags=["mpa"])


@router.get("", response_model=List[RatingRead])
def list_ratings(svc: RatingService = Depends(get_rating_service)) -> List[RatingRead]:
    return [RatingRead.model_validate(r) for r in svc.list()]


@router.get("/{rating_id}", response_model=RatingRead)
def get_rating(rating_id: int, svc: RatingService = Depends(get_rating_service)) -> RatingRead:
    with domain_errors():
        return RatingRead.model_validate(svc.get(rating_id))
