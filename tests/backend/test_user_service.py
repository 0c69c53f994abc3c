"""
Tests for UserService.

These tests cover:
- Registration validation (before storage is touched)
- Username uniqueness, at the service and at the unique index
- Credential verification without username enumeration
- User lookup and username search
"""

import pytest
from unittest.mock import AsyncMock


class TestRegisterUser:
    """Tests for UserService.register_user."""

    @pytest.mark.asyncio
    async def test_register_then_verify_returns_same_id(self, user_service, test_user_data):
        user_id = await user_service.register_user(**test_user_data)

        verified = await user_service.verify_user_credential("alice", "secret1")

        assert user_id.startswith("user-")
        assert verified == user_id

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, user_service, mock_notes_db, test_user_data):
        user_id = await user_service.register_user(**test_user_data)

        stored = await mock_notes_db.users.find_one({"_id": user_id})

        assert stored["password"] != "secret1"
        assert stored["password"].startswith("$2b$10$")

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_conflict(self, user_service, test_user_data):
        from app.core.exceptions import ConflictError

        first_id = await user_service.register_user(**test_user_data)

        with pytest.raises(ConflictError):
            await user_service.register_user("alice", "another1", "Someone Else")

        first = await user_service.get_user_by_id(first_id)
        assert first.fullname == "Alice A"
        assert await user_service.verify_user_credential("alice", "secret1") == first_id

    @pytest.mark.asyncio
    async def test_unique_index_conflict_becomes_conflict_error(self, user_service, test_user_data):
        """A registration racing past the pre-check still ends in ConflictError."""
        from app.core.exceptions import ConflictError

        await user_service.register_user(**test_user_data)
        user_service.verify_new_username = AsyncMock(return_value=None)

        with pytest.raises(ConflictError):
            await user_service.register_user("alice", "another1", "Someone Else")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username, password, fullname",
        [
            (None, "secret1", "Alice A"),
            ("alice", None, "Alice A"),
            ("alice", "secret1", None),
            (123, "secret1", "Alice A"),
            ("alice", 123456, "Alice A"),
            ("alice", "secret1", ["Alice"]),
            ("   ", "secret1", "Alice A"),
            ("alice", "      ", "Alice A"),
            ("alice", "secret1", "  "),
            ("a" * 51, "secret1", "Alice A"),
            ("alice", "12345", "Alice A"),
            ("alice", "secret1", "x" * 101),
        ],
    )
    async def test_invalid_payload_raises_validation_error_without_storage(
        self, user_service, mock_notes_db, username, password, fullname
    ):
        from app.core.exceptions import ValidationError

        user_service.users = AsyncMock()

        with pytest.raises(ValidationError):
            await user_service.register_user(username, password, fullname)

        user_service.users.find_one.assert_not_called()
        user_service.users.insert_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_boundary_lengths_are_accepted(self, user_service):
        user_id = await user_service.register_user("u" * 50, "123456", "f" * 100)

        assert user_id.startswith("user-")

    @pytest.mark.asyncio
    async def test_unconfirmed_insert_raises_storage_invariant(self, user_service):
        from app.core.exceptions import StorageInvariantError

        user_service.users = AsyncMock()
        user_service.users.find_one.return_value = None
        user_service.users.insert_one.return_value.inserted_id = None

        with pytest.raises(StorageInvariantError):
            await user_service.register_user("alice", "secret1", "Alice A")


class TestVerifyUserCredential:
    """Tests for UserService.verify_user_credential."""

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_user_fail_identically(
        self, user_service, registered_user
    ):
        from app.core.exceptions import AuthenticationError

        with pytest.raises(AuthenticationError) as wrong_password:
            await user_service.verify_user_credential("alice", "wrong-password")

        with pytest.raises(AuthenticationError) as unknown_user:
            await user_service.verify_user_credential("nobody", "secret1")

        assert type(wrong_password.value) is type(unknown_user.value)
        assert wrong_password.value.message == unknown_user.value.message
        assert wrong_password.value.status_code == unknown_user.value.status_code == 401


class TestUserLookup:
    """Tests for get_user_by_id and get_users_by_username."""

    @pytest.mark.asyncio
    async def test_get_user_by_id_excludes_password(self, user_service, registered_user):
        user = await user_service.get_user_by_id(registered_user)

        assert user.id == registered_user
        assert user.username == "alice"
        assert user.fullname == "Alice A"
        assert "password" not in user.model_dump()

    @pytest.mark.asyncio
    async def test_get_user_by_id_missing_raises_not_found(self, user_service):
        from app.core.exceptions import NotFoundError

        with pytest.raises(NotFoundError):
            await user_service.get_user_by_id("user-missing")

    @pytest.mark.asyncio
    async def test_search_matches_substring_case_sensitive(self, user_service):
        await user_service.register_user("alice", "secret1", "Alice A")
        await user_service.register_user("malice", "secret1", "Mal Ice")
        await user_service.register_user("ALICE2", "secret1", "Loud Alice")
        await user_service.register_user("bob", "secret1", "Bob B")

        users = await user_service.get_users_by_username("lic")

        assert sorted(u.username for u in users) == ["alice", "malice"]

    @pytest.mark.asyncio
    async def test_search_treats_fragment_literally(self, user_service):
        await user_service.register_user("a.b", "secret1", "Dotted")
        await user_service.register_user("axb", "secret1", "Plain")

        users = await user_service.get_users_by_username(".")

        assert [u.username for u in users] == ["a.b"]


class TestHashingOffTheEventLoop:
    """Password hashing must not stall other requests."""

    @pytest.mark.asyncio
    async def test_register_keeps_event_loop_responsive(self, user_service, test_user_data):
        import asyncio
        import time
        from unittest.mock import patch

        def slow_hash(password):
            time.sleep(0.3)
            return "$2b$10$" + "x" * 53

        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                await asyncio.sleep(0.01)
                ticks += 1

        task = asyncio.create_task(ticker())
        try:
            with patch("app.services.user_service.hash_password", side_effect=slow_hash):
                await user_service.register_user(**test_user_data)
        finally:
            task.cancel()

        assert ticks >= 5

    @pytest.mark.asyncio
    async def test_unknown_user_verify_keeps_event_loop_responsive(self, user_service):
        import asyncio
        import time
        from unittest.mock import patch
        from app.core.exceptions import AuthenticationError

        def slow_verify(password, hashed):
            time.sleep(0.3)
            return False

        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                await asyncio.sleep(0.01)
                ticks += 1

        task = asyncio.create_task(ticker())
        try:
            with patch("app.services.user_service.verify_password", side_effect=slow_verify):
                with pytest.raises(AuthenticationError):
                    await user_service.verify_user_credential("nobody", "secret1")
        finally:
            task.cancel()

        assert ticks >= 5
