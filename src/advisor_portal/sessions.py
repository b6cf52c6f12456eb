"""Server-side session store keyed by the opaque id in the session cookie."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from loguru import logger

from .core.security import new_session_id

LOCAL = "local"
PROXY = "proxy"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """An authenticated advisor session."""
    id: str
    advisor_id: Optional[int]
    principal: dict[str, Any]
    mode: str
    created_at: datetime
    expires_at: datetime
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) >= self.expires_at


class SessionStore:
    """
    In-memory session store with a fixed TTL.

    Sessions are never extended by activity. A session ends when its TTL
    elapses, when it is destroyed on logout, or when a token refresh fails.
    """

    def __init__(self, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = utcnow):
        self.ttl = ttl
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def create(
        self,
        principal: dict[str, Any],
        advisor_id: Optional[int],
        mode: str = LOCAL,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> Session:
        """Start a new session for an authenticated principal."""
        self.purge_expired()

        now = self._clock()
        session = Session(
            id=new_session_id(),
            advisor_id=advisor_id,
            principal=dict(principal),
            mode=mode,
            created_at=now,
            expires_at=now + self.ttl,
            access_token=access_token,
            refresh_token=refresh_token,
        )
        self._sessions[session.id] = session
        logger.info(f"Session created for advisor {advisor_id} ({mode})")
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a live session; expired sessions are dropped and return None."""
        session = self._sessions.get(session_id)
        if session is None:
            return None

        if session.is_expired(self._clock()):
            del self._sessions[session_id]
            logger.info(f"Session for advisor {session.advisor_id} expired")
            return None

        return session

    def update_tokens(
        self,
        session_id: str,
        access_token: str,
        refresh_token: Optional[str] = None,
    ) -> Optional[Session]:
        """Store tokens from a refresh exchange. The expiry is unchanged."""
        session = self.get(session_id)
        if session is None:
            return None

        session.access_token = access_token
        if refresh_token:
            session.refresh_token = refresh_token
        return session

    def destroy(self, session_id: str) -> bool:
        """Remove a session. Unknown ids are ignored."""
        return self._sessions.pop(session_id, None) is not None

    def purge_expired(self) -> int:
        """Drop every expired session; return how many were removed."""
        now = self._clock()
        expired = [id for id, session in self._sessions.items() if session.is_expired(now)]
        for id in expired:
            del self._sessions[id]
        if expired:
            logger.debug(f"Purged {len(expired)} expired sessions")
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
