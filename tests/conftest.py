"""
Global test fixtures for the Book Vibe backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) wrapped in a MongoStore
- FastAPI app and test clients bound to the mock store
- Token helpers for authenticated requests
- Seeded admin and default user documents
"""

import sys
from datetime import timedelta
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from bookvibe.core.security import create_access_token  # noqa: E402
from bookvibe.database.connections import MongoStore  # noqa: E402


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Each test gets a fresh in-memory server.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def store(mock_async_mongo_client) -> MongoStore:
    """MongoStore over the mock client, using the real database name."""
    return MongoStore(mock_async_mongo_client, "Book-vibe")


@pytest.fixture
def mock_db(store):
    """The mock Book-vibe database."""
    return store.db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic registration body."""
    return {
        "email": "reader@example.com",
        "name": "Test Reader",
        "photoURL": "https://example.com/reader.png",
    }


@pytest.fixture
def admin_email() -> str:
    return "admin@example.com"


@pytest_asyncio.fixture
async def admin_user(mock_db, admin_email) -> dict:
    """An admin user stored in the users collection."""
    doc = {"email": admin_email, "name": "Admin", "role": "admin"}
    await mock_db.users.insert_one(doc)
    return doc


@pytest_asyncio.fixture
async def default_user(mock_db, test_user_data) -> dict:
    """A default-role user stored in the users collection."""
    doc = {**test_user_data, "role": "default"}
    await mock_db.users.insert_one(doc)
    return doc


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def make_token():
    """
    Factory for signed access tokens.

    Usage:
        token = make_token("a@x.com")
        expired = make_token("a@x.com", expires_delta=timedelta(seconds=-1))
    """
    def _make(email: str, expires_delta: timedelta | None = None, **claims) -> str:
        return create_access_token({"email": email, **claims}, expires_delta=expires_delta)
    return _make


@pytest.fixture
def bearer():
    """Build an Authorization header dict from a token."""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _bearer


@pytest.fixture
def admin_headers(make_token, bearer, admin_email) -> dict:
    """Authorization header carrying the admin email; pair with admin_user."""
    return bearer(make_token(admin_email))


@pytest.fixture
def user_headers(make_token, bearer, test_user_data) -> dict:
    """Authorization header for the default user."""
    return bearer(make_token(test_user_data["email"]))


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(store):
    """
    Create FastAPI app for testing, bound to the mock store.
    """
    from bookvibe.main import create_app
    return create_app(store=store)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing; runs the lifespan.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for tests that also seed or inspect the mock database.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
