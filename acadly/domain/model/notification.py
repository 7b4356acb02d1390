"""Notification entity."""

from datetime import datetime

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import NotificationId, ProfileId


class Notification(DomainModel):
    """In-app notification, polled by the client."""

    id: NotificationId
    user_id: ProfileId
    title: str = Field(max_length=255)
    message: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
