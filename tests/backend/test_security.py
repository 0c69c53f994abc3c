"""
Tests for password hashing and token helpers in app.core.security.
"""

import pytest
from datetime import timedelta


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_bcrypt_hash_with_ten_rounds(self):
        """hash_password should return a cost-10 bcrypt hash."""
        from app.core.security import hash_password

        hashed = hash_password("secret1")

        assert hashed.startswith("$2b$10$")
        assert hashed != "secret1"

    def test_verify_password_correct_returns_true(self):
        from app.core.security import hash_password, verify_password

        hashed = hash_password("secret1")

        assert verify_password("secret1", hashed) is True

    def test_verify_password_wrong_returns_false(self):
        from app.core.security import hash_password, verify_password

        hashed = hash_password("secret1")

        assert verify_password("secret2", hashed) is False

    def test_hash_password_different_each_time(self):
        """Same password should produce different hashes due to salt."""
        from app.core.security import hash_password

        assert hash_password("secret1") != hash_password("secret1")


class TestAccessTokens:
    """Tests for JWT creation and decoding."""

    def test_token_round_trip_keeps_subject(self):
        from app.core.security import create_access_token, decode_token

        token = create_access_token(user_id="user-123")

        assert decode_token(token)["sub"] == "user-123"

    def test_expired_token_is_rejected(self):
        from app.core.security import JWTError, create_access_token, decode_token

        token = create_access_token(user_id="user-123", expires_delta=timedelta(seconds=-1))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_tampered_token_is_rejected(self):
        from app.core.security import JWTError, create_access_token, decode_token

        header, _, signature = create_access_token(user_id="user-123").split(".")
        _, forged_payload, _ = create_access_token(user_id="user-admin").split(".")

        with pytest.raises(JWTError):
            decode_token(f"{header}.{forged_payload}.{signature}")
