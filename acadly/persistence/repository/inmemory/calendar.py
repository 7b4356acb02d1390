"""In-memory calendar repositories for testing."""

from datetime import date
from typing import List, Optional

from acadly.domain.model import AcademicEvent, FacultyCalendar, FacultyEvent
from acadly.domain.repository import (
    AcademicEventRepository,
    FacultyCalendarRepository,
    FacultyEventRepository,
)
from acadly.domain.value import (
    AcademicEventId,
    FacultyCalendarId,
    FacultyEventId,
    ProfileId,
)

from .store import InMemoryStore


class InMemoryFacultyCalendarRepository(FacultyCalendarRepository):
    """In-memory implementation of FacultyCalendarRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyCalendar]:
        owned = [
            c for c in self._store.faculty_calendars.values() if c.faculty_id == faculty_id
        ]
        return sorted(owned, key=lambda c: c.uploaded_at, reverse=True)

    async def save(self, calendar: FacultyCalendar) -> FacultyCalendar:
        self._store.faculty_calendars[calendar.id] = calendar
        return calendar

    async def delete(
        self, calendar_id: FacultyCalendarId, faculty_id: ProfileId
    ) -> bool:
        calendar = self._store.faculty_calendars.get(calendar_id)
        if not calendar or calendar.faculty_id != faculty_id:
            return False
        del self._store.faculty_calendars[calendar_id]
        return True


class InMemoryFacultyEventRepository(FacultyEventRepository):
    """In-memory implementation of FacultyEventRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyEvent]:
        owned = [
            e for e in self._store.faculty_events.values() if e.faculty_id == faculty_id
        ]
        return sorted(owned, key=lambda e: e.event_date)

    async def find_upcoming(
        self, faculty_id: ProfileId, from_date: date, limit: int
    ) -> List[FacultyEvent]:
        events = await self.find_by_faculty(faculty_id)
        return [e for e in events if e.event_date >= from_date][:limit]

    async def save(self, event: FacultyEvent) -> FacultyEvent:
        self._store.faculty_events[event.id] = event
        return event

    async def delete(self, event_id: FacultyEventId, faculty_id: ProfileId) -> bool:
        event = self._store.faculty_events.get(event_id)
        if not event or event.faculty_id != faculty_id:
            return False
        del self._store.faculty_events[event_id]
        return True


class InMemoryAcademicEventRepository(AcademicEventRepository):
    """In-memory implementation of AcademicEventRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def search(
        self,
        start_from: Optional[date] = None,
        start_until: Optional[date] = None,
        title_contains: Optional[str] = None,
    ) -> List[AcademicEvent]:
        events = list(self._store.academic_events.values())
        if start_from is not None:
            events = [e for e in events if e.start_date >= start_from]
        if start_until is not None:
            events = [e for e in events if e.start_date <= start_until]
        if title_contains:
            needle = title_contains.lower()
            events = [e for e in events if needle in e.title.lower()]
        return sorted(events, key=lambda e: e.start_date)

    async def save(self, event: AcademicEvent) -> AcademicEvent:
        self._store.academic_events[event.id] = event
        return event

    async def delete(self, event_id: AcademicEventId) -> bool:
        return self._store.academic_events.pop(event_id, None) is not None
