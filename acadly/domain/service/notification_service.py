"""Notification domain service.

Notifications are a best-effort side channel: a failed write is logged and
dropped, never propagated to the operation that triggered it.
"""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from acadly.domain.model import Notification
from acadly.domain.repository import NotificationRepository
from acadly.domain.value import NotificationId, ProfileId

from .base import Service


NOTIFICATION_LIST_LIMIT = 50


class NotificationService(Service):
    """Domain service for notification fan-out and the inbox read side."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(self, user_id: ProfileId, title: str, message: str) -> None:
        """Send one notification, swallowing any failure.

        Args:
            user_id: Recipient profile ID
            title: Short title
            message: Notification body
        """
        with logfire.span(
            "notification_service.notify", user_id=str(user_id), title=title
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=user_id,
                title=title,
                message=message,
                created_at=datetime.now(),
            )
            try:
                await self.notification_repository.save(notification)
            except Exception as e:
                logfire.error(
                    "Failed to create notification",
                    user_id=str(user_id),
                    title=title,
                    error=str(e),
                )
                return
            logfire.info("Notification created", user_id=str(user_id), title=title)

    async def notify_many(
        self, user_ids: Sequence[ProfileId], title: str, message: str
    ) -> int:
        """Send the same notification to many recipients in one batch.

        Args:
            user_ids: Recipient profile IDs
            title: Short title
            message: Notification body

        Returns:
            Number of notifications written (0 on failure)
        """
        with logfire.span(
            "notification_service.notify_many", recipients=len(user_ids), title=title
        ):
            if not user_ids:
                return 0

            now = datetime.now()
            notifications = [
                Notification(
                    id=NotificationId(uuid4()),
                    user_id=user_id,
                    title=title,
                    message=message,
                    created_at=now,
                )
                for user_id in user_ids
            ]
            try:
                inserted = await self.notification_repository.save_many(notifications)
            except Exception as e:
                logfire.error(
                    "Failed to fan out notifications",
                    recipients=len(user_ids),
                    title=title,
                    error=str(e),
                )
                return 0
            logfire.info("Notifications fanned out", count=inserted, title=title)
            return inserted

    async def list_for_user(self, user_id: ProfileId) -> list[Notification]:
        """Get a user's most recent notifications, newest first."""
        return await self.notification_repository.find_by_user(
            user_id, NOTIFICATION_LIST_LIMIT
        )

    async def count_unread(self, user_id: ProfileId) -> int:
        return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, notification_id: NotificationId, user_id: ProfileId
    ) -> bool:
        """Mark a notification read on behalf of its recipient.

        Notifications belonging to someone else are left untouched.

        Args:
            notification_id: Notification to mark
            user_id: Acting profile

        Returns:
            True if a notification was updated
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            updated = await self.notification_repository.mark_read(
                notification_id, user_id
            )
            if not updated:
                logfire.info(
                    "Notification not marked read",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
            return updated

    async def mark_all_read(self, user_id: ProfileId) -> int:
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count
