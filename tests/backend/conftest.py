"""
Backend-specific test fixtures.

These fixtures seed the mock database through the real services so tests
start from an account and a note that exist.
"""

import pytest_asyncio


@pytest_asyncio.fixture
async def registered_user(user_service, test_user_data) -> str:
    """Register alice and return her user ID."""
    return await user_service.register_user(**test_user_data)


@pytest_asyncio.fixture
async def other_user(user_service) -> str:
    """Register a second account and return its user ID."""
    return await user_service.register_user("bob", "hunter22", "Bob B")


@pytest_asyncio.fixture
async def owned_note(note_service, registered_user, test_note_data) -> str:
    """Create a note owned by alice and return its ID."""
    return await note_service.add_note(owner=registered_user, **test_note_data)
