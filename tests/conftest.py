"""Shared fixtures: in-memory SQLite, fast bcrypt, FastAPI TestClient."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from mindflow.db.base import Base
from mindflow.db.session import engine
from mindflow.main import app


@pytest.fixture(autouse=True)
def db_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def fail_commits(monkeypatch):
    """Make every Session.commit raise until monkeypatch.undo()."""
    def commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))
    monkeypatch.setattr(Session, "commit", commit)


@pytest.fixture
def register_user(client):
    """Register a user and return the login payload (access_token + user)."""
    def _register(email="alex@example.com", password="s3cret-pass", name="Alex"):
        resp = client.post("/auth/register", json={"email": email, "password": password, "name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _register
