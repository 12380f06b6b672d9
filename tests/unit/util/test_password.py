"""Unit tests for password hashing."""

import pytest

from blog.util.password import dummy_password_hash, hash_password, verify_password


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    def test_hash_verifies_original_password(self):
        hashed = hash_password("s3cret!", rounds=4)

        assert hashed != "s3cret!"
        assert verify_password("s3cret!", hashed)

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password("s3cret!", rounds=4)

        assert not verify_password("wrong", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_overlong_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("x" * 73, rounds=4)

    def test_overlong_password_never_verifies(self):
        hashed = hash_password("x" * 72, rounds=4)

        assert not verify_password("x" * 73, hashed)

    def test_non_bcrypt_hash_does_not_verify(self):
        assert not verify_password("s3cret!", "plaintext")

    def test_dummy_hash_uses_requested_cost_and_is_reused(self):
        dummy = dummy_password_hash(rounds=4)

        assert dummy.startswith("$2b$04$")
        assert dummy_password_hash(rounds=4) is dummy
        assert not verify_password("s3cret!", dummy)
