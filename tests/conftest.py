"""Test fixtures: in-memory MongoDB and an API client bound to it.

Every test gets a fresh mongomock database with the production indexes, and
the get_database dependency is overridden so routes never touch a server.
"""

import os
import uuid

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from api.dependencies import get_database
from api.main import app
from models.database import create_indexes


class CountingCollection:
    """Collection proxy recording every write issued through it."""

    WRITE_METHODS = {
        "insert_one",
        "update_one",
        "update_many",
        "find_one_and_update",
        "replace_one",
        "delete_one",
        "delete_many",
    }

    def __init__(self, collection):
        self._collection = collection
        self.writes = []

    def __getattr__(self, name):
        attr = getattr(self._collection, name)
        if name not in self.WRITE_METHODS:
            return attr

        async def recorded(*args, **kwargs):
            self.writes.append(name)
            return await attr(*args, **kwargs)

        return recorded


@pytest.fixture
async def db():
    client = AsyncMongoMockClient()
    database = client[f"dietplan_test_{uuid.uuid4().hex}"]
    await create_indexes(database)
    yield database


@pytest.fixture
async def client(db):
    """FastAPI test client with the database dependency overridden."""
    app.dependency_overrides[get_database] = lambda: db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def register_and_login(client, email: str, password: str = "Str0ngP@ssw0rd") -> dict:
    """Create an account and return bearer headers for it."""
    response = await client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    response = await client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client):
    return await register_and_login(client, "nutritionist@example.com")


@pytest.fixture
async def other_auth_headers(client):
    return await register_and_login(client, "someone.else@example.com")


PATIENT_PAYLOAD = {
    "fullName": "Jane Doe",
    "gender": "female",
    "birthDate": "1990-05-20",
    "phone": "+55 11 91234-5678",
    "email": "jane.doe@example.com",
}


@pytest.fixture
async def patient_id(client, auth_headers):
    response = await client.post("/patients", json=PATIENT_PAYLOAD, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]
