"""User repository with account lookups."""

from typing import Optional

from loguru import logger

from .base import BaseRepository
from .reply_repository import ReplyRepository
from ..models import User


class UserRepository(BaseRepository[User]):
    """Repository for User operations. Deleting a user deletes its replies."""

    def __init__(self, replies: ReplyRepository):
        super().__init__(User)
        self.replies = replies

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by login username."""
        return next(
            (user for user in self._records.values() if user.username == username),
            None,
        )

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)."""
        email = email.lower()
        return next(
            (
                user for user in self._records.values()
                if user.email is not None and user.email.lower() == email
            ),
            None,
        )

    def username_exists(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def _after_delete(self, instance: User) -> None:
        removed = self.replies.delete_for_user(instance.id)
        logger.debug(f"Deleted user {instance.id} and {removed} replies")
