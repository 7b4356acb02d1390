"""Faculty calendar domain service."""

from datetime import date, datetime
from uuid import uuid4

import logfire

from acadly.domain.error import ValidationError
from acadly.domain.model import FacultyCalendar, FacultyEvent
from acadly.domain.repository import FacultyCalendarRepository, FacultyEventRepository
from acadly.domain.value import FacultyCalendarId, FacultyEventId, ProfileId

from .base import Service


class CalendarService(Service):
    """Manages each faculty member's private calendar images and events.

    Every operation is scoped to the owning profile.
    """

    def __init__(
        self,
        calendar_repository: FacultyCalendarRepository,
        event_repository: FacultyEventRepository,
    ) -> None:
        self.calendar_repository = calendar_repository
        self.event_repository = event_repository

    async def get_calendars(self, faculty_id: ProfileId) -> list[FacultyCalendar]:
        return await self.calendar_repository.find_by_faculty(faculty_id)

    async def get_events(self, faculty_id: ProfileId) -> list[FacultyEvent]:
        return await self.event_repository.find_by_faculty(faculty_id)

    async def get_upcoming_events(
        self, faculty_id: ProfileId, limit: int, today: date | None = None
    ) -> list[FacultyEvent]:
        """Get events dated today or later, soonest first.

        Args:
            faculty_id: Owner profile ID
            limit: Maximum number of events
            today: Reference date (defaults to the current date)

        Returns:
            Upcoming events
        """
        return await self.event_repository.find_upcoming(
            faculty_id, today or date.today(), limit
        )

    async def upload_calendar(
        self, faculty_id: ProfileId, image: str | None
    ) -> FacultyCalendar:
        """Store an uploaded calendar image.

        Args:
            faculty_id: Owner profile ID
            image: Encoded image data

        Returns:
            Saved calendar

        Raises:
            ValidationError: If no image data was provided
        """
        with logfire.span("calendar_service.upload_calendar", faculty_id=str(faculty_id)):
            if not image:
                raise ValidationError("Image data is required")

            calendar = FacultyCalendar(
                id=FacultyCalendarId(uuid4()),
                faculty_id=faculty_id,
                image=image,
                uploaded_at=datetime.now(),
            )
            saved = await self.calendar_repository.save(calendar)
            logfire.info("Calendar uploaded", calendar_id=str(saved.id))
            return saved

    async def delete_calendar(
        self, calendar_id: FacultyCalendarId, faculty_id: ProfileId
    ) -> bool:
        with logfire.span(
            "calendar_service.delete_calendar",
            calendar_id=str(calendar_id),
            faculty_id=str(faculty_id),
        ):
            deleted = await self.calendar_repository.delete(calendar_id, faculty_id)
            logfire.info("Calendar delete", calendar_id=str(calendar_id), deleted=deleted)
            return deleted

    async def create_event(
        self,
        faculty_id: ProfileId,
        title: str,
        event_date: date,
        description: str | None = None,
        reminder_date: date | None = None,
    ) -> FacultyEvent:
        """Add an event to a faculty member's calendar.

        Args:
            faculty_id: Owner profile ID
            title: Event title
            event_date: Date of the event
            description: Optional description
            reminder_date: Optional reminder date

        Returns:
            Saved event
        """
        with logfire.span("calendar_service.create_event", faculty_id=str(faculty_id)):
            event = FacultyEvent(
                id=FacultyEventId(uuid4()),
                faculty_id=faculty_id,
                title=title,
                description=description,
                event_date=event_date,
                reminder_date=reminder_date,
                created_at=datetime.now(),
            )
            saved = await self.event_repository.save(event)
            logfire.info("Faculty event created", event_id=str(saved.id))
            return saved

    async def delete_event(
        self, event_id: FacultyEventId, faculty_id: ProfileId
    ) -> bool:
        with logfire.span(
            "calendar_service.delete_event",
            event_id=str(event_id),
            faculty_id=str(faculty_id),
        ):
            deleted = await self.event_repository.delete(event_id, faculty_id)
            logfire.info("Faculty event delete", event_id=str(event_id), deleted=deleted)
            return deleted
