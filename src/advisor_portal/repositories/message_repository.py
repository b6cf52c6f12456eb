"""Message repository for the advisor's question flow."""

from typing import List

from loguru import logger

from .base import BaseRepository
from .reply_repository import ReplyRepository
from ..models import Message


class MessageRepository(BaseRepository[Message]):
    """Repository for Message operations. Deleting a message deletes its replies."""

    def __init__(self, replies: ReplyRepository):
        super().__init__(Message)
        self.replies = replies

    def get_ordered(self) -> List[Message]:
        """Get messages ordered by step, then by id for equal steps."""
        return sorted(self._records.values(), key=lambda message: (message.step, message.id))

    def _after_delete(self, instance: Message) -> None:
        removed = self.replies.delete_for_message(instance.id)
        logger.debug(f"Deleted message {instance.id} and {removed} replies")
