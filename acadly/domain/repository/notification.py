"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from acadly.domain.model import Notification
from acadly.domain.value import NotificationId, ProfileId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Writes are isolated from the surrounding transaction so that a failed
    notification never aborts the request that triggered it.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a single notification."""
        pass

    @abstractmethod
    async def save_many(self, notifications: Sequence[Notification]) -> int:
        """Save several notifications in one batched insert.

        Args:
            notifications: Notifications to insert

        Returns:
            Number of notifications inserted
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: ProfileId, limit: int) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: Recipient profile ID
            limit: Maximum number to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: ProfileId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, user_id: ProfileId
    ) -> bool:
        """Mark one notification read, only if it belongs to the user.

        Returns:
            True if a notification was updated
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: ProfileId) -> int:
        """Mark every notification of a user read.

        Returns:
            Number of notifications updated
        """
        pass
