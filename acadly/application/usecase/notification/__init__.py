"""Notification use cases."""

from .notifications import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationInfo,
    UnreadCountResponse,
)

__all__ = [
    "GetUnreadCountUseCase",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
    "NotificationInfo",
    "UnreadCountResponse",
]
