"""Tests for login and bearer-token handling."""

from youth_ministry_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_login_returns_token_that_authenticates(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@youthblossom.org", "password": "admin123"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["token"] == body["access_token"]
    assert body["user"] == {"id": "u1", "email": "admin@youthblossom.org", "name": "Admin User", "role": "admin"}

    youths = client.get("/api/v1/youths/", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert youths.status_code == 200
    assert len(youths.json()) > 0


def test_login_with_wrong_password(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@youthblossom.org", "password": "wrong-password"},
    )

    assert response.status_code == 401


def test_login_with_malformed_payload(client):
    response = client.post("/api/v1/auth/login", json={"email": "admin", "password": "x"})

    assert response.status_code == 400
    assert set(response.json()["fieldErrors"]) == {"email", "password"}


def test_missing_and_invalid_tokens_are_rejected(client):
    assert client.get("/api/v1/programs/").status_code == 401

    response = client.get("/api/v1/programs/", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "ghost@youthblossom.org"})

    response = client.get("/api/v1/programs/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_tampered_token_fails_verification():
    header, payload, signature = create_access_token({"sub": "admin@youthblossom.org"}).split(".")
    forged = create_access_token({"sub": "leader@youthblossom.org"}).split(".")[1]

    assert decode_access_token(f"{header}.{payload}.{signature}")["sub"] == "admin@youthblossom.org"
    assert decode_access_token(f"{header}.{forged}.{signature}") is None


def test_expired_token_fails_verification():
    assert decode_access_token(create_access_token({"sub": "a@b.org"}, expires_in=-10)) is None


def test_password_hashing():
    hashed = hash_password("leader123")

    assert verify_password("leader123", hashed)
    assert not verify_password("leader124", hashed)
    assert not verify_password("leader123", "garbage")
