# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool
from testcontainers.postgres import PostgresContainer

from filmorate.common.settings import get_settings
from filmorate.database.models import Base  # <-- imports the models/metadata
from filmorate.database.repos.lookup_repo import seed_lookups
from filmorate.services.stores import Stores, memory_stores, sql_stores

cfg = get_settings()


@pytest.fixture(scope="session")
def _database_url():
    """
    SQLite in memory by default; a throwaway PostgreSQL when
    USE_TESTCONTAINERS=true.
    """
    if not cfg.use_testcontainers:
        yield "sqlite+pysqlite://"
        return
    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    if _database_url.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory database
        engine = create_engine(
            _database_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    else:
        engine = create_engine(_database_url, future=True)

    # Skip Alembic here; just create tables from models and seed lookups
    Base.metadata.create_all(bind=engine)
    with Session(engine) as session:
        seed_lookups(session)
        session.commit()

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test SQLAlchemy Session bound to a transaction (rolled back after each test).
    """
    connection = db_engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture(params=["memory", "database"])
def stores(request) -> Stores:
    """The same test body runs against the volatile and the durable stores."""
    if request.param == "memory":
        return memory_stores()
    return sql_stores(request.getfixturevalue("db"))
