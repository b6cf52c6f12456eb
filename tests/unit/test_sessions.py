"""
Unit tests for the session store.

Tests creation, fixed TTL expiry, token updates and teardown.
"""

from datetime import datetime, timedelta, timezone

import pytest

from advisor_portal.sessions import LOCAL, PROXY, SessionStore


class FakeClock:
    """Controllable clock for expiry tests."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sessions(clock):
    return SessionStore(ttl=timedelta(hours=24), clock=clock)


def test_create_session(sessions, clock):
    session = sessions.create(principal={"id": 1, "name": "Advisor"}, advisor_id=1)

    assert session.mode == LOCAL
    assert session.advisor_id == 1
    assert session.access_token is None
    assert session.expires_at == clock.now + timedelta(hours=24)
    assert sessions.get(session.id) is session


def test_session_ids_are_unique(sessions):
    first = sessions.create(principal={}, advisor_id=1)
    second = sessions.create(principal={}, advisor_id=1)

    assert first.id != second.id
    assert len(sessions) == 2


def test_session_expires_after_ttl(sessions, clock):
    """Test that sessions are not renewed by use."""
    session = sessions.create(principal={}, advisor_id=1)

    clock.advance(hours=23)
    assert sessions.get(session.id) is session

    clock.advance(hours=1)
    assert sessions.get(session.id) is None
    assert session.id not in sessions


def test_unknown_session(sessions):
    assert sessions.get("missing") is None
    assert sessions.destroy("missing") is False


def test_destroy_session(sessions):
    session = sessions.create(principal={}, advisor_id=1)

    assert sessions.destroy(session.id) is True
    assert sessions.get(session.id) is None


def test_update_tokens_keeps_expiry(sessions, clock):
    session = sessions.create(
        principal={}, advisor_id=7, mode=PROXY, access_token="a1", refresh_token="r1"
    )
    expires_at = session.expires_at

    clock.advance(hours=1)
    sessions.update_tokens(session.id, "a2")

    assert session.access_token == "a2"
    assert session.refresh_token == "r1"
    assert session.expires_at == expires_at


def test_update_tokens_on_missing_session(sessions):
    assert sessions.update_tokens("missing", "token") is None


def test_purge_expired(sessions, clock):
    old = sessions.create(principal={}, advisor_id=1)
    clock.advance(hours=12)
    fresh = sessions.create(principal={}, advisor_id=2)
    clock.advance(hours=12)

    assert sessions.purge_expired() == 1
    assert old.id not in sessions
    assert fresh.id in sessions


def test_create_drops_expired_sessions(sessions, clock):
    for advisor_id in range(100):
        sessions.create(principal={}, advisor_id=advisor_id)
    clock.advance(days=30)

    for advisor_id in range(5):
        sessions.create(principal={}, advisor_id=advisor_id)

    assert len(sessions) == 5


def test_principal_is_copied(sessions):
    principal = {"id": 1}
    session = sessions.create(principal=principal, advisor_id=1)
    principal["id"] = 2

    assert session.principal == {"id": 1}
