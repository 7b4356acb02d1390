"""Calendar repository interfaces."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from acadly.domain.model import AcademicEvent, FacultyCalendar, FacultyEvent
from acadly.domain.value import (
    AcademicEventId,
    FacultyCalendarId,
    FacultyEventId,
    ProfileId,
)


class FacultyCalendarRepository(ABC):
    """Repository for uploaded faculty calendar images."""

    @abstractmethod
    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyCalendar]:
        """Find a faculty member's calendars, newest upload first."""
        pass

    @abstractmethod
    async def save(self, calendar: FacultyCalendar) -> FacultyCalendar:
        """Save a new calendar image."""
        pass

    @abstractmethod
    async def delete(
        self, calendar_id: FacultyCalendarId, faculty_id: ProfileId
    ) -> bool:
        """Delete a calendar if it belongs to the faculty member.

        Returns:
            True if a calendar was deleted
        """
        pass


class FacultyEventRepository(ABC):
    """Repository for personal faculty events."""

    @abstractmethod
    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyEvent]:
        """Find a faculty member's events ordered by event date."""
        pass

    @abstractmethod
    async def find_upcoming(
        self, faculty_id: ProfileId, from_date: date, limit: int
    ) -> List[FacultyEvent]:
        """Find a faculty member's events on or after a date.

        Args:
            faculty_id: Owner profile ID
            from_date: Earliest event date to include
            limit: Maximum number to return

        Returns:
            Events ordered by event date ascending
        """
        pass

    @abstractmethod
    async def save(self, event: FacultyEvent) -> FacultyEvent:
        """Save a new faculty event."""
        pass

    @abstractmethod
    async def delete(self, event_id: FacultyEventId, faculty_id: ProfileId) -> bool:
        """Delete an event if it belongs to the faculty member.

        Returns:
            True if an event was deleted
        """
        pass


class AcademicEventRepository(ABC):
    """Repository for the shared academic calendar."""

    @abstractmethod
    async def search(
        self,
        start_from: Optional[date] = None,
        start_until: Optional[date] = None,
        title_contains: Optional[str] = None,
    ) -> List[AcademicEvent]:
        """Find academic events ordered by start date.

        Args:
            start_from: Only events starting on or after this date
            start_until: Only events starting on or before this date
            title_contains: Case-insensitive substring of the title

        Returns:
            Matching events, start date ascending
        """
        pass

    @abstractmethod
    async def save(self, event: AcademicEvent) -> AcademicEvent:
        """Save a new academic event."""
        pass

    @abstractmethod
    async def delete(self, event_id: AcademicEventId) -> bool:
        """Delete an academic event.

        Returns:
            True if an event was deleted
        """
        pass
