"""Repository layer for in-memory data access."""

from .base import BaseRepository
from .user_repository import UserRepository
from .message_repository import MessageRepository
from .reply_repository import ReplyRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MessageRepository",
    "ReplyRepository",
]
