"""PostgreSQL implementation of Notification repository."""

from typing import List, Sequence

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Notification
from acadly.domain.repository import NotificationRepository
from acadly.domain.value import NotificationId, ProfileId
from acadly.persistence.mappers import model_to_dict, row_to_notification
from acadly.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Inserts run inside savepoints so a failure leaves the request's
    transaction intact.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Save a single notification."""
        stmt = insert(notifications_table).values(**model_to_dict(notification))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def save_many(self, notifications: Sequence[Notification]) -> int:
        """Save several notifications in one multi-row insert."""
        if not notifications:
            return 0

        stmt = insert(notifications_table).values(
            [model_to_dict(notification) for notification in notifications]
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return len(notifications)

    async def find_by_user(self, user_id: ProfileId, limit: int) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, user_id: ProfileId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_read(
        self, notification_id: NotificationId, user_id: ProfileId
    ) -> bool:
        """Mark one notification read, only if it belongs to the user."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.user_id == user_id,
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def mark_all_read(self, user_id: ProfileId) -> int:
        """Mark every unread notification of a user read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
