"""Relay of advisor requests to the remote MyAdvisor backend."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from ..core.exceptions import (
    PortalException,
    RemoteRejectedError,
    RemoteUnavailableError,
    UnauthorizedError,
)
from ..core.security import token_expiry
from ..remote_client import RemoteClient, RemoteResponse
from ..sessions import PROXY, Session, SessionStore


class ProxyService:
    """
    Forwards requests to the remote backend on behalf of a session.

    Outbound calls carry the session's bearer token when it has one, and
    the session's advisor id replaces whatever advisor id the client sent.
    Remote responses are handed back unchanged.
    """

    def __init__(
        self,
        remote: RemoteClient,
        sessions: SessionStore,
        refresh_leeway: timedelta = timedelta(seconds=30),
    ):
        self.remote = remote
        self.sessions = sessions
        self.refresh_leeway = refresh_leeway

    async def login(self, email: str, password: str) -> Tuple[Session, Dict[str, Any]]:
        """
        Authenticate against the remote backend and start a proxy session.

        Returns: (session, advisor)

        Raises:
            RemoteRejectedError: The remote refused the credentials
            RemoteUnavailableError: The remote could not be reached or its
                answer did not identify an advisor
        """
        response = await self.remote.request(
            "POST", "/login", json={"email": email, "password": password}
        )
        if not response.ok:
            logger.warning(f"Remote login rejected for {email} ({response.status_code})")
            raise RemoteRejectedError(response.status_code, response.body)

        body = response.body if isinstance(response.body, dict) else {}
        advisor = body.get("advisor") or {}
        advisor_id = advisor.get("id")
        if advisor_id is None:
            logger.error("Remote login response did not include an advisor id")
            raise RemoteUnavailableError()

        session = self.sessions.create(
            principal=advisor,
            advisor_id=advisor_id,
            mode=PROXY,
            access_token=body.get("access_token"),
            refresh_token=body.get("refresh_token"),
        )
        logger.info(f"Remote login for advisor {advisor_id}")
        return session, advisor

    def logout(self, session: Session) -> Optional[str]:
        """
        Destroy the local session.

        Returns the access token so the caller can notify the remote
        backend afterwards with notify_logout.
        """
        self.sessions.destroy(session.id)
        logger.info(f"Proxy logout for advisor {session.advisor_id}")
        return session.access_token

    async def notify_logout(self, token: Optional[str]) -> None:
        """Tell the remote backend about a logout. Failures are only logged."""
        try:
            response = await self.remote.request("POST", "/logout", token=token)
        except PortalException as e:
            logger.warning(f"Remote logout failed: {e.message}")
            return

        if not response.ok:
            logger.warning(f"Remote logout returned {response.status_code}")

    async def refresh(self, session: Session) -> Session:
        """
        Exchange the session's refresh token for a new access token.

        A failed exchange ends the session.

        Raises:
            UnauthorizedError: No refresh token, or the remote refused it
        """
        if not session.refresh_token:
            self._expire(session, "no refresh token")
            raise UnauthorizedError("Session expired")

        try:
            response = await self.remote.request(
                "POST", "/refresh", json={"refresh_token": session.refresh_token}
            )
        except RemoteUnavailableError:
            self._expire(session, "refresh request failed")
            raise

        body = response.body if isinstance(response.body, dict) else {}
        access_token = body.get("access_token")
        if not response.ok or not access_token:
            self._expire(session, f"refresh rejected ({response.status_code})")
            raise UnauthorizedError("Session expired")

        self.sessions.update_tokens(session.id, access_token, body.get("refresh_token"))
        logger.debug(f"Refreshed remote token for advisor {session.advisor_id}")
        return session

    async def forward(
        self,
        session: Session,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> RemoteResponse:
        """Send a request to the remote backend with the session's credentials."""
        if self._token_needs_refresh(session):
            await self.refresh(session)

        return await self.remote.request(
            method,
            path,
            token=session.access_token,
            json=json,
            params=params,
        )

    @staticmethod
    def scoped(payload: Dict[str, Any], session: Session) -> Dict[str, Any]:
        """Return the payload with the session's advisor id injected."""
        return {**payload, "advisor_id": session.advisor_id}

    def _token_needs_refresh(self, session: Session) -> bool:
        if not session.access_token or not session.refresh_token:
            return False

        expires_at = token_expiry(session.access_token)
        if expires_at is None:
            return False
        return datetime.now(timezone.utc) + self.refresh_leeway >= expires_at

    def _expire(self, session: Session, reason: str) -> None:
        self.sessions.destroy(session.id)
        logger.info(f"Session for advisor {session.advisor_id} ended: {reason}")
