"""
Test fixtures for the Developer Directory API test suite.

This module provides shared fixtures used across all test files:

  - user_store / developer_store: Fresh in-memory collections for each test
  - client: Async HTTP test client (unauthenticated)
  - auth_headers: Authorization header for a pre-registered user
  - authenticated_client: Test client carrying that header on every request
  - make_developer: Builds Developer records for pipeline/unit tests

Key design decisions:
  - InMemoryStore replaces the JSON files so each test starts from an
    empty collection and nothing is written to ./data.
  - We override the get_user_store / get_developer_store dependencies,
    so the application code works exactly as it does in production.
  - The auth fixtures create the user via the signup endpoint, so they
    exercise the real signup flow (not just store inserts).
"""

import os

# Settings are read at import time; these must be set before app.* is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.models.developer import Developer, DeveloperRole
from app.models.user import User
from app.storage import InMemoryStore, get_developer_store, get_user_store


TEST_USER = {
    "name": "Test User",
    "email": "testuser@example.com",
    "password": "SecurePass123",
}


@pytest.fixture
def user_store():
    return InMemoryStore("users", User)


@pytest.fixture
def developer_store():
    return InMemoryStore("developers", Developer)


@pytest_asyncio.fixture
async def client(user_store, developer_store):
    """
    Async HTTP test client with in-memory stores injected.

    This overrides the store dependencies so all requests hit fresh
    in-memory collections instead of the JSON files.
    """
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_developer_store] = lambda: developer_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers(client):
    """Sign up the test user and return its Authorization header."""
    response = await client.post("/api/auth/signup", json=TEST_USER)
    assert response.status_code == 201, f"Signup failed: {response.text}"
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def authenticated_client(client, auth_headers):
    """
    Test client with a pre-registered user and JWT token.

    Sets the Authorization header on the client for all subsequent requests.
    """
    client.headers.update(auth_headers)
    return client


@pytest.fixture
def make_developer():
    """
    Factory for Developer records.

    Each call gets a creation time one minute after the previous one, so
    later calls are "newer" unless created_at is passed explicitly.
    """
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(name="Dev", role=DeveloperRole.BACKEND, tech_stack="Python", experience=1, **extra):
        counter["n"] += 1
        fields = {
            "id": f"dev-{counter['n']}",
            "name": name,
            "role": role,
            "tech_stack": tech_stack,
            "experience": experience,
            "created_at": base + timedelta(minutes=counter["n"]),
        }
        fields.update(extra)
        return Developer(**fields)

    return _make
