"""Reply repository with per-user and per-message indexes."""

from collections import defaultdict
from typing import List

from .base import BaseRepository
from ..models import Reply


class ReplyRepository(BaseRepository[Reply]):
    """Repository for Reply operations.

    Keeps ``user_id -> reply ids`` and ``message_id -> reply ids`` indexes
    so cascades from users and messages do not scan every reply.
    """

    timestamp_field = "reply_date"

    def __init__(self):
        super().__init__(Reply)
        self._by_user: defaultdict[int, set[int]] = defaultdict(set)
        self._by_message: defaultdict[int, set[int]] = defaultdict(set)

    def create(self, **data) -> Reply:
        reply = super().create(**data)
        self._by_user[reply.user_id].add(reply.id)
        self._by_message[reply.message_id].add(reply.id)
        return reply

    def update(self, id: int, /, **data) -> Reply:
        # Foreign keys are fixed at creation so the indexes stay valid
        data.pop("user_id", None)
        data.pop("message_id", None)
        return super().update(id, **data)

    def for_user(self, user_id: int) -> List[Reply]:
        """Get a user's replies ordered by id."""
        return [self._records[id] for id in sorted(self._by_user.get(user_id, ()))]

    def for_message(self, message_id: int) -> List[Reply]:
        """Get replies to a message ordered by id."""
        return [self._records[id] for id in sorted(self._by_message.get(message_id, ()))]

    def for_user_and_message(self, user_id: int, message_id: int) -> List[Reply]:
        """Get a user's replies to one message."""
        ids = self._by_user.get(user_id, set()) & self._by_message.get(message_id, set())
        return [self._records[id] for id in sorted(ids)]

    def delete_for_user(self, user_id: int) -> int:
        """Delete all replies by a user; return how many were removed."""
        return len(self.delete_many(list(self._by_user.get(user_id, ()))))

    def delete_for_message(self, message_id: int) -> int:
        """Delete all replies to a message; return how many were removed."""
        return len(self.delete_many(list(self._by_message.get(message_id, ()))))

    def _after_delete(self, instance: Reply) -> None:
        _discard(self._by_user, instance.user_id, instance.id)
        _discard(self._by_message, instance.message_id, instance.id)


def _discard(index: defaultdict[int, set[int]], key: int, reply_id: int) -> None:
    ids = index.get(key)
    if ids is None:
        return
    ids.discard(reply_id)
    if not ids:
        del index[key]
