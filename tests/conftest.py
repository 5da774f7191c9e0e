"""
Shared fixtures: an isolated store and app per test.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import config
from database.store import InMemoryStore
from main import create_app


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """bcrypt's minimum cost keeps the suite quick."""
    monkeypatch.setattr(config, "bcrypt_rounds", 4)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store) -> TestClient:
    return TestClient(create_app(store), raise_server_exceptions=False)


def register(client: TestClient, username="alice", email="a@x.com", password="pw123"):
    return client.post(
        "/api/register",
        json={"username": username, "email": email, "password": password},
    )


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_token(client) -> str:
    return register(client).json()["token"]
