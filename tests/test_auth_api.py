"""API tests for registration, login and profile."""

from datetime import timedelta

from services.auth_service import create_access_token
from tests.conftest import register_and_login


async def test_register_returns_user(client):
    response = await client.post("/auth/register", json={"email": " New.User@Example.com ", "password": "longenough"})

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new.user@example.com"
    assert body["role"] == "user"
    assert body["id"]


async def test_register_rejects_duplicates_and_short_passwords(client):
    await client.post("/auth/register", json={"email": "dup@example.com", "password": "longenough"})

    response = await client.post("/auth/register", json={"email": "DUP@example.com", "password": "longenough"})
    assert response.status_code == 409

    response = await client.post("/auth/register", json={"email": "short@example.com", "password": "short"})
    assert response.status_code == 400


async def test_password_is_hashed(client, db):
    await client.post("/auth/register", json={"email": "hash@example.com", "password": "longenough"})

    user = await db["users"].find_one({"email": "hash@example.com"})

    assert user["passwordHash"] != "longenough"
    assert user["passwordHash"].startswith("$2")


async def test_login_with_wrong_password(client):
    await client.post("/auth/register", json={"email": "login@example.com", "password": "longenough"})

    response = await client.post("/auth/login", json={"email": "login@example.com", "password": "wrong-password"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_password_whitespace_is_kept(client):
    await client.post("/auth/register", json={"email": "spaces@example.com", "password": "  spaced secret  "})

    response = await client.post("/auth/login", json={"email": "spaces@example.com", "password": "spaced secret"})
    assert response.status_code == 401

    response = await client.post("/auth/login", json={"email": "spaces@example.com", "password": "  spaced secret  "})
    assert response.status_code == 200


async def test_profile_echoes_claims(client):
    headers = await register_and_login(client, "profile@example.com")

    response = await client.get("/auth/profile", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "profile@example.com"
    assert body["role"] == "user"
    assert body["userId"]


async def test_profile_rejects_missing_and_bad_tokens(client):
    response = await client.get("/auth/profile")
    assert response.status_code == 401

    response = await client.get("/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_expired_token_is_rejected(client):
    token = create_access_token({"_id": "abc", "email": "x@example.com"}, expires_delta=timedelta(minutes=-1))

    response = await client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Token expired"
