"""Local authentication endpoints."""

from fastapi import APIRouter, Depends, Response, status

from ..config import Settings
from ..dependencies import (
    clear_session_cookie,
    get_auth_service,
    get_current_session,
    get_settings,
    set_session_cookie,
)
from ..schemas.auth import LoginRequest, PrincipalResponse, RegisterRequest
from ..schemas.user import UserResponse
from ..services import AuthService
from ..sessions import Session


router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    Register a local account.

    The new account is logged in straight away.
    """
    user, session = auth_service.register(**request.model_dump())
    set_session_cookie(response, session, settings)
    return UserResponse.model_validate(user)


@router.post("/auth/login", response_model=PrincipalResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Login with username (or email) and password."""
    _, session = auth_service.login(
        password=request.password,
        username=request.username,
        email=request.email,
    )
    set_session_cookie(response, session, settings)
    return PrincipalResponse(**session.principal)


@router.post("/auth/logout")
async def logout(
    response: Response,
    session: Session = Depends(get_current_session),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Destroy the current session."""
    auth_service.logout(session)
    clear_session_cookie(response, settings)
    return {"message": "Logged out successfully"}


@router.get("/auth/me", response_model=PrincipalResponse)
async def get_current_user_info(
    session: Session = Depends(get_current_session),
):
    """
    Get the authenticated principal.

    Requires a valid session cookie.
    """
    return PrincipalResponse(**session.principal)
