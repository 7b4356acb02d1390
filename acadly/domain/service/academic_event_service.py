"""Academic calendar domain service."""

import calendar
from datetime import date, datetime
from uuid import uuid4

import logfire

from acadly.domain.error import ValidationError
from acadly.domain.model import AcademicEvent, Profile
from acadly.domain.repository import AcademicEventRepository
from acadly.domain.value import AcademicEventCategory, AcademicEventId

from .base import Service
from .notification_service import NotificationService
from .profile_service import ProfileService


def month_bounds(month: str) -> tuple[date, date]:
    """Parse a YYYY-MM string into the first and last day of that month.

    Raises:
        ValidationError: If the string is not a valid month
    """
    try:
        year_part, month_part = month.split("-")
        year, month_number = int(year_part), int(month_part)
        last_day = calendar.monthrange(year, month_number)[1]
        return date(year, month_number, 1), date(year, month_number, last_day)
    except ValueError:
        raise ValidationError("month: expected format YYYY-MM")


class AcademicEventService(Service):
    """Domain service for the shared academic calendar."""

    def __init__(
        self,
        academic_event_repository: AcademicEventRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize academic event service.

        Args:
            academic_event_repository: Academic event repository
            profile_service: Profile domain service (recipient lookup)
            notification_service: Notification domain service
        """
        self.academic_event_repository = academic_event_repository
        self.profile_service = profile_service
        self.notification_service = notification_service

    async def search(
        self, month: str | None = None, search: str | None = None
    ) -> list[AcademicEvent]:
        """Find academic events, optionally within a month or by title.

        Args:
            month: Calendar month as YYYY-MM
            search: Case-insensitive title substring

        Returns:
            Matching events ordered by start date
        """
        with logfire.span("academic_event_service.search", month=month, search=search):
            start_from = start_until = None
            if month:
                start_from, start_until = month_bounds(month)
            return await self.academic_event_repository.search(
                start_from=start_from,
                start_until=start_until,
                title_contains=search or None,
            )

    async def create_event(
        self,
        creator: Profile,
        title: str,
        start_date: date,
        category: AcademicEventCategory,
        description: str | None = None,
        end_date: date | None = None,
    ) -> AcademicEvent:
        """Publish an academic event and announce it to everyone else.

        Args:
            creator: Publishing profile
            title: Event title
            start_date: First day of the event
            category: Event category
            description: Optional description
            end_date: Optional last day

        Returns:
            Saved event
        """
        with logfire.span(
            "academic_event_service.create_event", creator_id=str(creator.id)
        ):
            event = AcademicEvent(
                id=AcademicEventId(uuid4()),
                title=title,
                description=description,
                start_date=start_date,
                end_date=end_date,
                category=category,
                created_by=creator.id,
                created_at=datetime.now(),
            )
            saved = await self.academic_event_repository.save(event)

            recipients = [
                profile_id
                for profile_id in await self.profile_service.get_all_ids()
                if profile_id != creator.id
            ]
            await self.notification_service.notify_many(
                recipients,
                "New Academic Event",
                f'A new academic event "{saved.title}" has been added.',
            )

            logfire.info(
                "Academic event created",
                event_id=str(saved.id),
                recipients=len(recipients),
            )
            return saved

    async def delete_event(self, event_id: AcademicEventId) -> bool:
        with logfire.span("academic_event_service.delete_event", event_id=str(event_id)):
            deleted = await self.academic_event_repository.delete(event_id)
            logfire.info("Academic event delete", event_id=str(event_id), deleted=deleted)
            return deleted
