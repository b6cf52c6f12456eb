"""Message (question) schemas. JSON field names are camelCase."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MessageCreate(BaseModel):
    """Schema for creating a message."""
    step: int = Field(0, ge=0)
    content: str = Field(..., min_length=1)
    trigger_keyword: str = Field("", alias="triggerKeyword")
    fixed_reply: Optional[str] = Field(None, alias="fixedReply")
    fixed_reply_required: bool = Field(False, alias="fixedReplyRequired")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def require_fixed_reply(self):
        if self.fixed_reply_required and not (self.fixed_reply or "").strip():
            raise ValueError("Fixed reply is required when fixedReplyRequired is set")
        return self


class MessageUpdate(BaseModel):
    """Schema for patching a message. Only supplied fields change."""
    step: Optional[int] = Field(None, ge=0)
    content: Optional[str] = Field(None, min_length=1)
    trigger_keyword: Optional[str] = Field(None, alias="triggerKeyword")
    fixed_reply: Optional[str] = Field(None, alias="fixedReply")
    fixed_reply_required: Optional[bool] = Field(None, alias="fixedReplyRequired")

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    """Schema for message response."""
    id: int
    step: int
    content: str
    trigger_keyword: str = Field(alias="triggerKeyword")
    fixed_reply: Optional[str] = Field(alias="fixedReply")
    fixed_reply_required: bool = Field(alias="fixedReplyRequired")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
