"""In-memory record types held by the entity store."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    """A WhatsApp contact, or a local advisor account when username is set."""
    id: int
    name: str
    mobile_number: str = ""
    email: Optional[str] = None
    salutation: Optional[str] = None
    age_group: Optional[str] = None
    advisor_id: Optional[int] = None
    username: Optional[str] = None
    password_hash: Optional[str] = None
    created_at: datetime


class Message(BaseModel):
    """A scripted question in the advisor's flow, ordered by step."""
    id: int
    step: int = 0
    content: str
    trigger_keyword: str = ""
    fixed_reply: Optional[str] = None
    fixed_reply_required: bool = False
    created_at: datetime


class Reply(BaseModel):
    """A user's answer to a message."""
    id: int
    user_id: int
    message_id: int
    content: str
    reply_date: datetime
