from __future__ import annotations
from fastapi import APIRouter, Depends

from filmorate.common.settings import Settings
from filmorate.services.api.deps import get_app_settings

router = APIRouter()

@router.get("/healthz")
def healthz(s: Settings = Depends(get_app_settings)):
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "storage": s.storage_backend,
    }
