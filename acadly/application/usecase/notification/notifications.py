"""Notification inbox use cases.

All operations act only on the authenticated user's own notifications.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.application.usecase.common import MessageResponse
from acadly.domain.service import NotificationService
from acadly.domain.value import NotificationId, ProfileId


class NotificationInfo(BaseModel):
    """Notification as shown in the inbox."""

    id: str
    user_id: str
    title: str
    message: str
    is_read: bool
    created_at: datetime


class UnreadCountResponse(BaseModel):
    """Unread notification count."""

    count: int


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str  # UUID string
    user_id: str  # Profile ID from authenticated user


class ListNotificationsUseCase:
    """Use case for reading the latest notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, user_id: str) -> list[NotificationInfo]:
        notifications = await self.notification_service.list_for_user(
            ProfileId(UUID(user_id))
        )
        return [
            NotificationInfo(
                id=str(n.id),
                user_id=str(n.user_id),
                title=n.title,
                message=n.message,
                is_read=n.is_read,
                created_at=n.created_at,
            )
            for n in notifications
        ]


class GetUnreadCountUseCase:
    """Use case for counting unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, user_id: str) -> UnreadCountResponse:
        count = await self.notification_service.count_unread(ProfileId(UUID(user_id)))
        return UnreadCountResponse(count=count)


class MarkNotificationReadUseCase:
    """Use case for marking one notification read.

    Someone else's notification is silently left unchanged.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> MessageResponse:
        await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            ProfileId(UUID(request.user_id)),
        )
        return MessageResponse(message="Marked as read")


class MarkAllNotificationsReadUseCase:
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, user_id: str) -> MessageResponse:
        await self.notification_service.mark_all_read(ProfileId(UUID(user_id)))
        return MessageResponse(message="All marked as read")
