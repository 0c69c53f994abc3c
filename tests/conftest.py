"""
Global test fixtures for the Notes API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) with the real indexes
- Service instances wired to the mock database
- Fake collaboration delegates
- An async HTTP client bound to the FastAPI app
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_notes_db(mock_async_mongo_client):
    """Provide mock notes_db database with the same indexes as the app."""
    from app.database.databases import notes_db

    db = mock_async_mongo_client[notes_db.DB_NAME]
    await notes_db.create_notes_indexes(db)
    yield db


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def user_service(mock_notes_db):
    from app.services.user_service import UserService
    return UserService(mock_notes_db)


@pytest.fixture
def note_service(mock_notes_db):
    from app.services.note_service import NoteService
    return NoteService(mock_notes_db)


@pytest.fixture
def collaboration_service(mock_notes_db):
    from app.services.collaboration_service import CollaborationService
    return CollaborationService(mock_notes_db)


@pytest.fixture
def make_delegate():
    """
    Build a fake CollaborationDelegate.

    Usage:
        delegate = make_delegate(True)
        delegate = make_delegate(side_effect=RuntimeError("boom"))
        delegate.is_collaborator.assert_not_awaited()
    """
    class FakeDelegate:
        def __init__(self, result=False, side_effect=None):
            self.is_collaborator = AsyncMock(return_value=result, side_effect=side_effect)

    def _make(result: bool = False, side_effect=None) -> FakeDelegate:
        return FakeDelegate(result, side_effect)

    return _make


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "password": "secret1",
        "fullname": "Alice A",
    }


@pytest.fixture
def test_note_data() -> dict:
    """Basic note payload."""
    return {
        "title": "Groceries",
        "body": "Milk, eggs",
        "tags": ["home"],
    }


# =============================================================================
# FastAPI Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_notes_db):
    """
    FastAPI app whose service dependencies use the mock database.
    """
    async def _get_database(db_name=None):
        return mock_notes_db

    with patch("app.dependencies.services.get_database", _get_database):
        from app.main import app
        yield app


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    ASGITransport does not run the lifespan, so no real MongoDB is touched.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def make_token():
    """Issue a real JWT for a user ID."""
    from app.core.security import create_access_token

    def _make(user_id: str) -> str:
        return create_access_token(user_id=user_id)

    return _make
