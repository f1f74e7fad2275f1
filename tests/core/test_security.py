"""
Tests for password hashing and token generation.

System role: Verification of credential primitives
"""

import re
from unittest.mock import patch

from elham.core.security import generate_session_token, hash_password, verify_password


class TestPasswords:
    """Test suite for hash_password() and verify_password()."""

    def test_hash_verifies_with_original_password(self) -> None:
        password_hash = hash_password("s3cret", rounds=4)

        assert password_hash.startswith("$2")
        assert verify_password("s3cret", password_hash) is True

    def test_wrong_password_is_rejected(self) -> None:
        password_hash = hash_password("s3cret", rounds=4)

        assert verify_password("S3cret", password_hash) is False

    def test_password_is_not_trimmed(self) -> None:
        password_hash = hash_password("s3cret", rounds=4)

        assert verify_password(" s3cret ", password_hash) is False

    def test_missing_hash_never_matches(self) -> None:
        assert verify_password("anything", None) is False
        assert verify_password("anything", "") is False

    def test_malformed_hash_never_matches(self) -> None:
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_long_password_is_hashed_from_first_72_bytes(self) -> None:
        password_hash = hash_password("p" * 100, rounds=4)

        assert verify_password("p" * 100, password_hash) is True
        assert verify_password("p" * 72 + "different tail", password_hash) is True
        assert verify_password("p" * 71, password_hash) is False

    def test_long_password_against_missing_hash_does_not_raise(self) -> None:
        assert verify_password("x" * 100, None) is False

    def test_missing_hash_check_does_not_hash_at_request_time(self) -> None:
        with patch("elham.core.security.bcrypt.hashpw") as hashpw:
            assert verify_password("anything", None) is False

        hashpw.assert_not_called()


class TestSessionTokens:
    """Test suite for generate_session_token()."""

    def test_token_is_64_lowercase_hex_chars(self) -> None:
        token = generate_session_token()

        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_tokens_are_unique(self) -> None:
        tokens = {generate_session_token() for _ in range(50)}

        assert len(tokens) == 50
