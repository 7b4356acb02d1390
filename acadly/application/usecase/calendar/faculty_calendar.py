"""Faculty calendar use cases."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.application.usecase.common import MessageResponse
from acadly.domain.model import FacultyCalendar, FacultyEvent
from acadly.domain.service import CalendarService
from acadly.domain.value import FacultyCalendarId, FacultyEventId, ProfileId


class FacultyCalendarInfo(BaseModel):
    """Uploaded calendar image."""

    id: str
    faculty_id: str
    image: str
    uploaded_at: datetime

    @classmethod
    def from_calendar(cls, calendar: FacultyCalendar) -> "FacultyCalendarInfo":
        return cls(
            id=str(calendar.id),
            faculty_id=str(calendar.faculty_id),
            image=calendar.image,
            uploaded_at=calendar.uploaded_at,
        )


class FacultyEventInfo(BaseModel):
    """Personal calendar event."""

    id: str
    faculty_id: str
    title: str
    description: str | None
    event_date: date
    reminder_date: date | None
    created_at: datetime

    @classmethod
    def from_event(cls, event: FacultyEvent) -> "FacultyEventInfo":
        return cls(
            id=str(event.id),
            faculty_id=str(event.faculty_id),
            title=event.title,
            description=event.description,
            event_date=event.event_date,
            reminder_date=event.reminder_date,
            created_at=event.created_at,
        )


class FacultyCalendarResponse(BaseModel):
    """A faculty member's calendar images and events."""

    calendars: list[FacultyCalendarInfo]
    events: list[FacultyEventInfo]


class UploadCalendarRequest(BaseModel):
    """Upload calendar request."""

    image: str | None
    faculty_id: str  # Profile ID from authenticated user


class CreateFacultyEventRequest(BaseModel):
    """Create faculty event request."""

    title: str
    description: str | None = None
    event_date: date
    reminder_date: date | None = None
    faculty_id: str  # Profile ID from authenticated user


class DeleteOwnedItemRequest(BaseModel):
    """Delete a calendar or event owned by the caller."""

    item_id: str  # UUID string
    faculty_id: str  # Profile ID from authenticated user


class GetFacultyCalendarUseCase:
    """Use case for viewing one's own calendar."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, faculty_id: str) -> FacultyCalendarResponse:
        owner = ProfileId(UUID(faculty_id))
        calendars = await self.calendar_service.get_calendars(owner)
        events = await self.calendar_service.get_events(owner)
        return FacultyCalendarResponse(
            calendars=[FacultyCalendarInfo.from_calendar(c) for c in calendars],
            events=[FacultyEventInfo.from_event(e) for e in events],
        )


class UploadCalendarUseCase:
    """Use case for uploading a timetable image."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: UploadCalendarRequest) -> FacultyCalendarInfo:
        """Execute upload flow.

        Raises:
            ValidationError: If no image data was sent
        """
        calendar = await self.calendar_service.upload_calendar(
            ProfileId(UUID(request.faculty_id)), request.image
        )
        return FacultyCalendarInfo.from_calendar(calendar)


class DeleteCalendarUseCase:
    """Use case for deleting one's own calendar image."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: DeleteOwnedItemRequest) -> MessageResponse:
        await self.calendar_service.delete_calendar(
            FacultyCalendarId(UUID(request.item_id)),
            ProfileId(UUID(request.faculty_id)),
        )
        return MessageResponse(message="Calendar deleted")


class CreateFacultyEventUseCase:
    """Use case for adding a personal event."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: CreateFacultyEventRequest) -> FacultyEventInfo:
        event = await self.calendar_service.create_event(
            faculty_id=ProfileId(UUID(request.faculty_id)),
            title=request.title,
            event_date=request.event_date,
            description=request.description,
            reminder_date=request.reminder_date,
        )
        return FacultyEventInfo.from_event(event)


class DeleteFacultyEventUseCase:
    """Use case for deleting one's own event."""

    def __init__(self, calendar_service: CalendarService) -> None:
        self.calendar_service = calendar_service

    async def execute(self, request: DeleteOwnedItemRequest) -> MessageResponse:
        await self.calendar_service.delete_event(
            FacultyEventId(UUID(request.item_id)),
            ProfileId(UUID(request.faculty_id)),
        )
        return MessageResponse(message="Event deleted")
