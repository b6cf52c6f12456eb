"""Endpoints relayed to the remote MyAdvisor backend.

The remote status code and body are returned unchanged. Advisor scoping
always comes from the session, never from the client.
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Response
from fastapi.responses import JSONResponse

from ..config import Settings
from ..dependencies import (
    clear_session_cookie,
    get_current_session,
    get_proxy_service,
    get_settings,
    set_session_cookie,
)
from ..remote_client import RemoteResponse
from ..schemas.auth import ProxyLoginRequest, ProxyLoginResponse
from ..schemas.proxy import (
    ContentSidsUpdate,
    ProxyPromoRequest,
    ProxyUserCreate,
    QuestionCreate,
    QuestionUpdate,
    SendMessageRequest,
)
from ..services import ProxyService
from ..sessions import Session


router = APIRouter(prefix="/proxy", tags=["Proxy"])


def relay(response: RemoteResponse) -> Response:
    """Turn a remote response into the client response, status and body as-is."""
    if response.body is None:
        return Response(status_code=response.status_code)
    return JSONResponse(content=response.body, status_code=response.status_code)


# =============================================================================
# Session
# =============================================================================

@router.post("/login", response_model=ProxyLoginResponse)
async def proxy_login(
    request: ProxyLoginRequest,
    response: Response,
    proxy: ProxyService = Depends(get_proxy_service),
    settings: Settings = Depends(get_settings),
):
    """
    Login through the remote backend.

    The remote tokens are kept in the server-side session and attached to
    every later proxied call.
    """
    session, advisor = await proxy.login(request.email, request.password)
    set_session_cookie(response, session, settings)
    return ProxyLoginResponse(advisor=advisor)


@router.post("/logout")
async def proxy_logout(
    response: Response,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
    settings: Settings = Depends(get_settings),
):
    """
    Logout. The local session always ends; the remote backend is told
    afterwards and its answer does not affect the result.
    """
    token = proxy.logout(session)
    background_tasks.add_task(proxy.notify_logout, token)
    clear_session_cookie(response, settings)
    return {"message": "Logged out successfully"}


@router.post("/refresh")
async def proxy_refresh(
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    """Exchange the refresh token for a new remote access token."""
    await proxy.refresh(session)
    return {"message": "Token refreshed"}


# =============================================================================
# Users
# =============================================================================

@router.get("/users")
async def proxy_list_users(
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(await proxy.forward(session, "GET", f"/users/{session.advisor_id}"))


@router.post("/users")
async def proxy_create_user(
    request: ProxyUserCreate,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    """Submit a new contact to the remote backend under the session's advisor."""
    payload = proxy.scoped(request.model_dump(exclude={"advisor_id"}), session)
    return relay(await proxy.forward(session, "POST", "/submit_form", json=payload))


@router.get("/users/{user_id}/replies")
async def proxy_list_user_replies(
    user_id: int,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(
        await proxy.forward(session, "GET", f"/users/{session.advisor_id}/replies/{user_id}")
    )


@router.delete("/users/{user_id}")
async def proxy_delete_user(
    user_id: int,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(
        await proxy.forward(
            session,
            "DELETE",
            f"/delete_user/{user_id}",
            params={"advisor_id": session.advisor_id},
        )
    )


# =============================================================================
# Questions
# =============================================================================

@router.get("/questions")
async def proxy_list_questions(
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(await proxy.forward(session, "GET", f"/questions/{session.advisor_id}"))


@router.post("/questions")
async def proxy_add_question(
    request: QuestionCreate,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    payload = proxy.scoped(request.model_dump(by_alias=True, exclude={"advisor_id"}), session)
    return relay(await proxy.forward(session, "POST", "/questions/add", json=payload))


@router.put("/questions/{question_id}")
async def proxy_update_question(
    question_id: int,
    request: QuestionUpdate,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(
        await proxy.forward(session, "PUT", f"/questions/{question_id}", json=request.model_dump())
    )


@router.delete("/questions/{question_id}")
async def proxy_delete_question(
    question_id: int,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(await proxy.forward(session, "DELETE", f"/questions/{question_id}"))


# =============================================================================
# Messaging
# =============================================================================

@router.post("/send-message")
async def proxy_send_message(
    request: SendMessageRequest,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    payload = proxy.scoped(request.model_dump(exclude={"advisor_id"}), session)
    return relay(await proxy.forward(session, "POST", "/send_message", json=payload))


@router.post("/send-promo")
async def proxy_send_promo(
    request: ProxyPromoRequest,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    """Send a content-SID template to several users in one remote call."""
    payload = proxy.scoped(
        {"content_sid": request.content_sid, "user_id": request.user_ids},
        session,
    )
    return relay(await proxy.forward(session, "POST", "/send_message", json=payload))


# =============================================================================
# Config
# =============================================================================

@router.get("/config/content-sids")
async def proxy_get_content_sids(
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(await proxy.forward(session, "GET", "/config/content-sids"))


@router.put("/config/content-sids")
async def proxy_update_content_sids(
    request: ContentSidsUpdate,
    session: Session = Depends(get_current_session),
    proxy: ProxyService = Depends(get_proxy_service),
):
    return relay(
        await proxy.forward(
            session, "PUT", "/config/update-content-sids", json=request.model_dump()
        )
    )
