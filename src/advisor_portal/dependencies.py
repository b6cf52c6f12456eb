"""Dependency injection for FastAPI endpoints."""

from datetime import timedelta

from fastapi import Depends, Request, Response
from loguru import logger

from .config import Settings
from .core.exceptions import UnauthorizedError
from .remote_client import RemoteClient
from .services import AuthService, ProxyService
from .sessions import LOCAL, Session, SessionStore
from .store import EntityStore


# Application state dependencies
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> EntityStore:
    """Get the application's entity store."""
    return request.app.state.store


def get_session_store(request: Request) -> SessionStore:
    """Get the application's session store."""
    return request.app.state.sessions


def get_remote_client(request: Request) -> RemoteClient:
    return request.app.state.remote


# Service dependencies
def get_auth_service(
    store: EntityStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthService:
    """Get AuthService instance."""
    return AuthService(store, sessions)


def get_proxy_service(
    remote: RemoteClient = Depends(get_remote_client),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> ProxyService:
    """Get ProxyService instance."""
    return ProxyService(
        remote,
        sessions,
        refresh_leeway=timedelta(seconds=settings.TOKEN_REFRESH_LEEWAY_SECONDS),
    )


# Authentication dependencies
def get_current_session(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Session:
    """
    Get the session named by the session cookie.

    A local session ends once its account is deleted.

    Raises:
        UnauthorizedError: No cookie, the session is unknown or expired, or
            its local account no longer exists
    """
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not session_id:
        raise UnauthorizedError("Unauthorized")

    session = sessions.get(session_id)
    if session is None:
        raise UnauthorizedError("Session expired or invalid")

    if session.mode == LOCAL and not store.users.exists(session.advisor_id):
        sessions.destroy(session.id)
        logger.info(f"Session for deleted account {session.advisor_id} ended")
        raise UnauthorizedError("Session expired or invalid")

    return session


# Cookie helpers
def set_session_cookie(response: Response, session: Session, settings: Settings) -> None:
    """Attach the session cookie; it lives exactly as long as the session."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.id,
        max_age=int((session.expires_at - session.created_at).total_seconds()),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
