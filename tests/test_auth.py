"""Tests for registration, login and the bearer-token dependency."""

from jose import jwt

from mindflow.core.security import decode_access_token, hash_password
from mindflow.db.session import SessionLocal
from mindflow.services import auth_service
from tests.conftest import auth_headers, fail_commits


def test_register_logs_user_in(register_user):
    data = register_user()

    assert data["access_token"]
    assert data["user"]["email"] == "alex@example.com"
    assert data["user"]["name"] == "Alex"
    assert "password" not in data["user"]


def test_login_token_decodes_to_registered_user(client, register_user):
    registered = register_user()

    resp = client.post("/auth/login", json={"email": "alex@example.com", "password": "s3cret-pass"})
    assert resp.status_code == 200
    claims = decode_access_token(resp.json()["access_token"])

    assert claims["sub"] == str(registered["user"]["id"])
    assert claims["email"] == "alex@example.com"


def test_tokens_have_no_expiry_by_default(register_user):
    token = register_user()["access_token"]
    assert "exp" not in jwt.get_unverified_claims(token)


def test_login_wrong_password_rejected(client, register_user):
    register_user()

    resp = client.post("/auth/login", json={"email": "alex@example.com", "password": "nope-nope"})

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"


def test_login_unknown_email_rejected(client):
    resp = client.post("/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert resp.status_code == 401


def test_email_is_case_insensitive(client, register_user):
    register_user(email="Alex@Example.com")

    resp = client.post("/auth/login", json={"email": "alex@example.com", "password": "s3cret-pass"})
    assert resp.status_code == 200


def test_duplicate_email_conflicts(client, register_user):
    register_user()

    resp = client.post("/auth/register", json={"email": "ALEX@example.com", "password": "another-pass"})

    assert resp.status_code == 409


def test_register_validation_errors(client):
    resp = client.post("/auth/register", json={"email": "not-an-email", "password": "123"})

    assert resp.status_code == 422
    fields = {err["loc"][-1] for err in resp.json()["detail"]}
    assert {"email", "password"} <= fields


def test_register_rejects_password_longer_than_bcrypt_limit(client):
    resp = client.post("/auth/register", json={"email": "long@example.com", "password": "x" * 73})
    assert resp.status_code == 422


def test_me_requires_valid_token(client, register_user):
    token = register_user()["access_token"]

    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers=auth_headers("garbage")).status_code == 401

    resp = client.get("/auth/me", headers=auth_headers(token))
    assert resp.status_code == 200
    assert resp.json()["email"] == "alex@example.com"


def test_token_signed_with_other_secret_rejected(client, register_user):
    user_id = register_user()["user"]["id"]
    forged = jwt.encode({"sub": str(user_id), "email": "alex@example.com"}, "other-secret", algorithm="HS256")

    assert client.get("/auth/me", headers=auth_headers(forged)).status_code == 401


def test_validate_user_strips_password():
    db = SessionLocal()
    try:
        auth_service.register(db, "sam@example.com", "hunter22")

        user = auth_service.validate_user(db, "sam@example.com", "hunter22")
        assert user is not None
        assert "password" not in user
        assert auth_service.validate_user(db, "sam@example.com", "wrong") is None
    finally:
        db.close()


def test_password_is_stored_hashed():
    db = SessionLocal()
    try:
        auth_service.register(db, "kim@example.com", "plain-text")
        stored = auth_service.find_by_email(db, "kim@example.com").password
        assert stored != "plain-text"
        assert stored.startswith("$2")
        assert hash_password("plain-text") != stored  # fresh salt every time
    finally:
        db.close()


def test_register_database_failure(client, monkeypatch):
    fail_commits(monkeypatch)
    resp = client.post("/auth/register", json={"email": "lee@example.com", "password": "secret-1"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to register user"

    monkeypatch.undo()
    resp = client.post("/auth/register", json={"email": "lee@example.com", "password": "secret-1"})
    assert resp.status_code == 201
