"""In-memory notification repository for testing."""

from typing import List, Sequence

from acadly.domain.model import Notification
from acadly.domain.repository import NotificationRepository
from acadly.domain.value import NotificationId, ProfileId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, notification: Notification) -> Notification:
        self._store.notifications[notification.id] = notification
        return notification

    async def save_many(self, notifications: Sequence[Notification]) -> int:
        for notification in notifications:
            self._store.notifications[notification.id] = notification
        return len(notifications)

    async def find_by_user(self, user_id: ProfileId, limit: int) -> List[Notification]:
        owned = [n for n in self._store.notifications.values() if n.user_id == user_id]
        owned.sort(key=lambda n: n.created_at, reverse=True)
        return owned[:limit]

    async def count_unread(self, user_id: ProfileId) -> int:
        return sum(
            1
            for n in self._store.notifications.values()
            if n.user_id == user_id and not n.is_read
        )

    async def mark_read(
        self, notification_id: NotificationId, user_id: ProfileId
    ) -> bool:
        notification = self._store.notifications.get(notification_id)
        if not notification or notification.user_id != user_id:
            return False
        self._store.notifications[notification_id] = notification.model_copy(
            update={"is_read": True}
        )
        return True

    async def mark_all_read(self, user_id: ProfileId) -> int:
        unread = [
            n
            for n in self._store.notifications.values()
            if n.user_id == user_id and not n.is_read
        ]
        for notification in unread:
            self._store.notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
        return len(unread)
