import os
import pytest
from contextvars import ContextVar

# Force the in-memory SQLite engine before the app modules are imported
os.environ.setdefault("PYTEST_RUNNING", "1")
os.environ.pop("DEV_MODE", None)

from fastapi.testclient import TestClient

import organicchain.db.database as db_module
from organicchain.db import models
from organicchain.api.main import app

ADMIN_EMAIL = "admin@example.com"

_current_session: ContextVar[object] = ContextVar("_current_session", default=None)
# Fallback for threadpool contexts where ContextVar may not propagate
_GLOBAL_SESSION = None


@pytest.fixture(autouse=True)
def _admin_emails_env(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAILS", ADMIN_EMAIL)
    monkeypatch.delenv("DEV_MODE", raising=False)
    yield


# Fresh schema per test on the shared in-memory database
@pytest.fixture(autouse=True)
def db_session():
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    token = _current_session.set(session)
    global _GLOBAL_SESSION
    _GLOBAL_SESSION = session
    try:
        yield session
    finally:
        _current_session.reset(token)
        _GLOBAL_SESSION = None
        session.close()
        models.Base.metadata.drop_all(bind=db_module.engine)


def _override_get_db():
    session = _current_session.get()
    if session is not None:
        yield session
        return
    if _GLOBAL_SESSION is not None:
        yield _GLOBAL_SESSION
        return
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()


app.dependency_overrides[db_module.get_db] = _override_get_db


@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    return TestClient(app)


def _h(user: str, email: str = None):
    return {"x-auth-request-user": user, "x-auth-request-email": email or f"{user}@example.com"}


@pytest.fixture
def headers_for(client):
    """Return a factory building identity headers for a user with the given role selected."""
    def _make(user: str, role: str = None):
        if role == "admin":
            h = _h(user, ADMIN_EMAIL)
            # First request creates the superadmin and grants the admin role
            r = client.get("/me", headers=h)
            assert r.status_code == 200, r.text
            return h
        h = _h(user)
        if role:
            r = client.put("/me/role", json={"role": role}, headers=h)
            assert r.status_code == 200, r.text
        return h
    return _make
