"""User, reply and bulk-action schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """User as listed to the advisor. Password hashes are never included."""
    id: int
    salutation: Optional[str] = None
    name: str
    mobile_number: str
    email: Optional[str] = None
    advisor_id: Optional[int] = None
    age_group: Optional[str] = None
    username: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class DeleteUsersRequest(BaseModel):
    """Bulk user delete."""
    user_ids: List[int] = Field(..., alias="userIds")

    class Config:
        populate_by_name = True


class ReplyResponse(BaseModel):
    """A reply together with the text of the message it answers."""
    id: int
    user_id: int = Field(alias="userId")
    message_id: int = Field(alias="messageId")
    content: str
    reply_date: datetime = Field(alias="replyDate")
    message_content: str = Field(alias="messageContent")

    class Config:
        populate_by_name = True


class SendPromoRequest(BaseModel):
    """Send a templated message to a set of users."""
    user_ids: List[int] = Field(..., alias="userIds", min_length=1)
    content_id: str = Field(..., alias="contentId", min_length=1)

    class Config:
        populate_by_name = True


class SendPromoResponse(BaseModel):
    message: str
    affected_users: int = Field(alias="affectedUsers")
    content_id: str = Field(alias="contentId")
    skipped_user_ids: List[int] = Field(default_factory=list, alias="skippedUserIds")

    class Config:
        populate_by_name = True
