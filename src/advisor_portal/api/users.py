"""User, reply and promo endpoints served from the entity store."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from loguru import logger

from ..dependencies import get_current_session, get_store
from ..schemas.user import (
    DeleteUsersRequest,
    ReplyResponse,
    SendPromoRequest,
    SendPromoResponse,
    UserResponse,
)
from ..store import EntityStore


router = APIRouter(tags=["Users"], dependencies=[Depends(get_current_session)])


@router.get("/users", response_model=List[UserResponse])
async def list_users(store: EntityStore = Depends(get_store)):
    return [UserResponse.model_validate(user) for user in store.users.get_all()]


@router.delete("/users", status_code=status.HTTP_204_NO_CONTENT)
async def delete_users(request: DeleteUsersRequest, store: EntityStore = Depends(get_store)):
    """
    Delete users in bulk, along with their replies.

    Ids that do not exist are ignored.
    """
    deleted = store.delete_users(request.user_ids)
    logger.info(f"Deleted {len(deleted)} of {len(request.user_ids)} requested users")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/users/{user_id}/replies", response_model=List[ReplyResponse])
async def list_user_replies(user_id: int, store: EntityStore = Depends(get_store)):
    """List a user's replies, each with the text of the message it answers."""
    return [
        ReplyResponse(
            id=reply.id,
            user_id=reply.user_id,
            message_id=reply.message_id,
            content=reply.content,
            reply_date=reply.reply_date,
            message_content=store.message_content(reply.message_id),
        )
        for reply in store.user_replies(user_id)
    ]


@router.post("/send-promo", response_model=SendPromoResponse)
async def send_promo(request: SendPromoRequest, store: EntityStore = Depends(get_store)):
    """
    Send a templated message to a list of users.

    Delivery is simulated in demo mode. affectedUsers counts every
    requested id; unknown ones are also reported back as skipped.
    """
    delivered = [id for id in request.user_ids if store.users.exists(id)]
    skipped = [id for id in request.user_ids if id not in delivered]

    for user_id in delivered:
        logger.debug(f"Promo {request.content_id} queued for user {user_id}")
    logger.info(f"Promo {request.content_id} sent to {len(delivered)} users")

    return SendPromoResponse(
        message="Promotional message sent successfully",
        affected_users=len(request.user_ids),
        content_id=request.content_id,
        skipped_user_ids=skipped,
    )
