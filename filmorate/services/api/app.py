from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session, sessionmaker

from filmorate.common.logging import get_logger
from filmorate.common.settings import Settings, get_settings
from filmorate.services.api.routers import films, genres, health, mpa, users
from filmorate.services.stores import Stores, memory_stores

logger = get_logger()


def create_app(
    settings: Optional[Settings] = None,
    *,
    stores: Optional[Stores] = None,
    session_factory: Optional[sessionmaker[Session]] = None,
) -> FastAPI:
    """
    Build the API. Storage is picked here: explicit `stores` win, then
    Settings.storage_backend ("memory" creates a fresh volatile set owned
    by this app; "database" opens a Session per request from
    `session_factory`, or the configured engine).
    """
    cfg = settings or get_settings()
    dev = cfg.app_env.lower() == "development"

    app = FastAPI(
        title="Filmorate API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Storage
    if stores is None and cfg.storage_backend == "memory":
        stores = memory_stores()
    app.state.settings = cfg
    app.state.stores = stores
    app.state.session_factory = session_factory
    logger.info("Filmorate API using %s storage", "in-memory" if stores is not None else "database")

    # Routers
    app.include_router(health.router)
    for module in (users, films, genres, mpa):
        app.include_router(module.router, prefix=cfg.api.prefix)
    return app

app = create_app()
