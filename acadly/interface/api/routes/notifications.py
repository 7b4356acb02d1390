"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.common import MessageResponse
from acadly.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationInfo,
    UnreadCountResponse,
)
from acadly.interface.api.session import require_profile

router = APIRouter(
    prefix="/api/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=list[NotificationInfo])
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[NotificationInfo]:
    """The caller's latest notifications, newest first."""
    user = await require_profile(get_current_user_use_case, auth_token)
    return await list_notifications_use_case.execute(user.id)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UnreadCountResponse:
    user = await require_profile(get_current_user_use_case, auth_token)
    return await get_unread_count_use_case.execute(user.id)


@router.patch("/read-all", response_model=MessageResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    user = await require_profile(get_current_user_use_case, auth_token)
    return await mark_all_read_use_case.execute(user.id)


@router.patch("/{notification_id}/read", response_model=MessageResponse)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Mark one notification read.

    Notifications belonging to someone else are left untouched.
    """
    user = await require_profile(get_current_user_use_case, auth_token)
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(
            notification_id=str(notification_id), user_id=user.id
        )
    )
