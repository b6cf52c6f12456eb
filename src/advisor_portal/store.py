"""Entity store: the in-memory backend for users, messages and replies."""

from datetime import datetime
from typing import Iterable, List, Optional

from .core.exceptions import NotFoundError
from .models import Message, Reply, User
from .repositories import MessageRepository, ReplyRepository, UserRepository


class EntityStore:
    """
    Owns the user, message and reply repositories for one application.

    Deleting a user or a message also deletes the replies that reference it.
    The store is created by the app factory and handed to route handlers
    through dependencies; nothing else holds a reference to its maps.
    """

    def __init__(self):
        self.replies = ReplyRepository()
        self.users = UserRepository(self.replies)
        self.messages = MessageRepository(self.replies)

    # Users

    def delete_users(self, user_ids: Iterable[int]) -> List[int]:
        """Delete users and their replies; unknown ids are ignored."""
        return self.users.delete_many(user_ids)

    def user_replies(self, user_id: int) -> List[Reply]:
        return self.replies.for_user(user_id)

    def replies_for(self, user_id: int, message_id: int) -> List[Reply]:
        return self.replies.for_user_and_message(user_id, message_id)

    # Messages

    def delete_message(self, message_id: int) -> bool:
        """Delete a message and its replies; unknown ids are a no-op."""
        return self.messages.delete(message_id)

    # Replies

    def create_reply(
        self,
        user_id: int,
        message_id: int,
        content: str,
        reply_date: Optional[datetime] = None,
    ) -> Reply:
        """
        Record a user's reply to a message.

        Raises:
            NotFoundError: The user or the message does not exist
        """
        if not self.users.exists(user_id):
            raise NotFoundError("User", user_id)
        if not self.messages.exists(message_id):
            raise NotFoundError("Message", message_id)
        data = {"user_id": user_id, "message_id": message_id, "content": content}
        if reply_date is not None:
            data["reply_date"] = reply_date
        return self.replies.create(**data)

    def message_content(self, message_id: int, default: str = "Message not found") -> str:
        message: Message | None = self.messages.get(message_id)
        return message.content if message else default

    def __repr__(self) -> str:
        return (
            f"EntityStore(users={len(self.users)}, messages={len(self.messages)}, "
            f"replies={len(self.replies)})"
        )


def principal_of(user: User) -> dict:
    """Identifying fields of a local account, safe to hand to the client."""
    return {
        "id": user.id,
        "username": user.username,
        "name": user.name,
        "email": user.email,
    }
