# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from filmorate.services.api.app import create_app
from filmorate.services.api.deps import get_stores
from filmorate.services.stores import memory_stores, sql_stores


@pytest.fixture()
def api_client():
    """
    A TestClient over a fresh set of in-memory stores. The stores live on the
    app, so every request in one test sees the same data.
    """
    app = create_app(stores=memory_stores())
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def api_client_db(db_engine):
    """
    A TestClient whose `get_stores` dependency is overridden to yield stores
    over a single Session bound to the test connection/transaction.
    All API calls in one test share the same session (so POST -> GET works),
    and everything is rolled back at the end of the test.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)

    app = create_app()

    def _override():
        # yield stores over THIS session for every request in this test
        yield sql_stores(session)

    app.dependency_overrides[get_stores] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture(params=["memory", "database"])
def client(request):
    """Run an API test against both backings."""
    name = "api_client" if request.param == "memory" else "api_client_db"
    return request.getfixturevalue(name)
