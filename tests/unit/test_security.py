"""Unit tests for password hashing and remote token inspection."""

from datetime import datetime, timedelta, timezone

import jwt

from advisor_portal.core.security import (
    hash_password,
    new_session_id,
    token_expiry,
    verify_password,
)

REMOTE_KEY = "remote-signing-key-used-only-in-tests"


def test_hash_is_salted():
    """Test that the same password hashes differently each time."""
    first = hash_password("password123")
    second = hash_password("password123")

    assert first != "password123"
    assert first != second


def test_verify_password():
    hashed = hash_password("password123")

    assert verify_password("password123", hashed)
    assert not verify_password("wrongpassword", hashed)


def test_verify_against_non_bcrypt_value():
    assert not verify_password("password123", "password123")


def test_session_ids_are_random():
    ids = {new_session_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(id) >= 32 for id in ids)


def test_token_expiry_reads_exp_claim():
    exp = datetime.now(timezone.utc).replace(microsecond=0) + timedelta(minutes=5)
    token = jwt.encode({"sub": "7", "exp": int(exp.timestamp())}, REMOTE_KEY, algorithm="HS256")

    assert token_expiry(token) == exp


def test_token_expiry_of_expired_token():
    """Test that an already expired token still reports its expiry."""
    exp = datetime.now(timezone.utc).replace(microsecond=0) - timedelta(hours=1)
    token = jwt.encode({"exp": int(exp.timestamp())}, REMOTE_KEY, algorithm="HS256")

    assert token_expiry(token) == exp


def test_token_expiry_without_exp():
    token = jwt.encode({"sub": "7"}, REMOTE_KEY, algorithm="HS256")

    assert token_expiry(token) is None


def test_token_expiry_of_opaque_token():
    assert token_expiry("not-a-jwt") is None
