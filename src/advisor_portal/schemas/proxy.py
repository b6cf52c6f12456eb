"""Schemas for calls relayed to the remote backend.

Any ``advisor_id`` a client sends is dropped; the session's advisor id is
injected when the payload is forwarded.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProxyUserCreate(BaseModel):
    """New contact submitted to the remote backend on the advisor's behalf."""
    salutation: Optional[str] = None
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: Optional[str] = None
    mobile_number: str = Field(..., min_length=8)
    age_group: Optional[str] = None
    message: Optional[str] = None
    advisor_id: Optional[int] = None

    class Config:
        extra = "allow"


class QuestionCreate(BaseModel):
    """New question in the remote flow."""
    question: str = Field(..., min_length=1)
    trigger_keyword: str = Field("", alias="triggerKeyword")
    is_predefined_answer: bool = False
    advisor_id: Optional[int] = None

    class Config:
        populate_by_name = True


class QuestionUpdate(BaseModel):
    """Replace a question's position and text."""
    step: int = Field(..., ge=0)
    question: str = Field(..., min_length=1)


class SendMessageRequest(BaseModel):
    """Free-text message to one user. Extra fields pass through."""
    user_id: int
    message: str = Field(..., min_length=1)
    advisor_id: Optional[int] = None

    class Config:
        extra = "allow"


class ProxyPromoRequest(BaseModel):
    """Templated (content SID) message to several users."""
    content_sid: str = Field(..., alias="contentSid", min_length=1)
    user_ids: List[int] = Field(..., alias="userIds", min_length=1)

    class Config:
        populate_by_name = True


class ContentSidsUpdate(BaseModel):
    """Template SIDs that open and close the WhatsApp flow."""
    first_content_sid: str = Field(..., min_length=1)
    last_content_sid: str = Field(..., min_length=1)
