"""Message (question flow) endpoints served from the entity store."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..core.exceptions import NotFoundError, ValidationError
from ..dependencies import get_current_session, get_store
from ..schemas.message import MessageCreate, MessageResponse, MessageUpdate
from ..store import EntityStore


router = APIRouter(
    prefix="/messages",
    tags=["Messages"],
    dependencies=[Depends(get_current_session)],
)


@router.get("", response_model=List[MessageResponse])
async def list_messages(store: EntityStore = Depends(get_store)):
    """List messages in flow order."""
    return [MessageResponse.model_validate(message) for message in store.messages.get_ordered()]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: int, store: EntityStore = Depends(get_store)):
    message = store.messages.get(message_id)
    if message is None:
        raise NotFoundError("Message", message_id)
    return MessageResponse.model_validate(message)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_message(data: MessageCreate, store: EntityStore = Depends(get_store)):
    message = store.messages.create(**data.model_dump())
    return MessageResponse.model_validate(message)


@router.patch("/{message_id}", response_model=MessageResponse)
async def update_message(
    message_id: int,
    updates: MessageUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Patch a message.

    Only fields present in the body change. A message that requires a
    fixed reply must keep a non-empty one.
    """
    # Only fixedReply may be cleared with null
    update_data = {
        key: value
        for key, value in updates.model_dump(exclude_unset=True).items()
        if value is not None or key == "fixed_reply"
    }

    existing = store.messages.get(message_id)
    if existing is None:
        raise NotFoundError("Message", message_id)

    merged = existing.model_copy(update=update_data)
    if merged.fixed_reply_required and not (merged.fixed_reply or "").strip():
        raise ValidationError("Fixed reply is required when fixedReplyRequired is set")

    message = store.messages.update(message_id, **update_data)
    return MessageResponse.model_validate(message)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(message_id: int, store: EntityStore = Depends(get_store)):
    """Delete a message and every reply to it. Unknown ids are ignored."""
    store.delete_message(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
