"""Calendar entities.

Faculty calendars and events are private to their owner. Academic events
form the shared institutional calendar.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import (
    AcademicEventCategory,
    AcademicEventId,
    FacultyCalendarId,
    FacultyEventId,
    ProfileId,
)


class FacultyCalendar(DomainModel):
    """An uploaded timetable image (opaque encoded string)."""

    id: FacultyCalendarId
    faculty_id: ProfileId
    image: str = Field(min_length=1)
    uploaded_at: datetime = Field(default_factory=datetime.now)


class FacultyEvent(DomainModel):
    """A personal event on a faculty member's calendar."""

    id: FacultyEventId
    faculty_id: ProfileId
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    event_date: date
    reminder_date: Optional[date] = None
    created_at: datetime = Field(default_factory=datetime.now)


class AcademicEvent(DomainModel):
    """An event on the institution-wide academic calendar."""

    id: AcademicEventId
    title: str = Field(min_length=2, max_length=255)
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    category: AcademicEventCategory
    created_by: ProfileId
    created_at: datetime = Field(default_factory=datetime.now)
