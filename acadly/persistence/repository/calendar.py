"""PostgreSQL implementations of calendar repositories."""

from datetime import date
from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

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
from acadly.persistence.mappers import (
    model_to_dict,
    row_to_academic_event,
    row_to_faculty_calendar,
    row_to_faculty_event,
)
from acadly.persistence.tables import (
    academic_events_table,
    faculty_calendars_table,
    faculty_events_table,
)


class PostgresFacultyCalendarRepository(FacultyCalendarRepository):
    """PostgreSQL implementation of FacultyCalendarRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyCalendar]:
        stmt = (
            select(faculty_calendars_table)
            .where(faculty_calendars_table.c.faculty_id == faculty_id)
            .order_by(faculty_calendars_table.c.uploaded_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_faculty_calendar(row._asdict()) for row in result.fetchall()]

    async def save(self, calendar: FacultyCalendar) -> FacultyCalendar:
        stmt = insert(faculty_calendars_table).values(**model_to_dict(calendar))
        await self.session.execute(stmt)
        await self.session.flush()
        return calendar

    async def delete(
        self, calendar_id: FacultyCalendarId, faculty_id: ProfileId
    ) -> bool:
        stmt = delete(faculty_calendars_table).where(
            and_(
                faculty_calendars_table.c.id == calendar_id,
                faculty_calendars_table.c.faculty_id == faculty_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresFacultyEventRepository(FacultyEventRepository):
    """PostgreSQL implementation of FacultyEventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_faculty(self, faculty_id: ProfileId) -> List[FacultyEvent]:
        stmt = (
            select(faculty_events_table)
            .where(faculty_events_table.c.faculty_id == faculty_id)
            .order_by(faculty_events_table.c.event_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_faculty_event(row._asdict()) for row in result.fetchall()]

    async def find_upcoming(
        self, faculty_id: ProfileId, from_date: date, limit: int
    ) -> List[FacultyEvent]:
        stmt = (
            select(faculty_events_table)
            .where(
                and_(
                    faculty_events_table.c.faculty_id == faculty_id,
                    faculty_events_table.c.event_date >= from_date,
                )
            )
            .order_by(faculty_events_table.c.event_date)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_faculty_event(row._asdict()) for row in result.fetchall()]

    async def save(self, event: FacultyEvent) -> FacultyEvent:
        stmt = insert(faculty_events_table).values(**model_to_dict(event))
        await self.session.execute(stmt)
        await self.session.flush()
        return event

    async def delete(self, event_id: FacultyEventId, faculty_id: ProfileId) -> bool:
        stmt = delete(faculty_events_table).where(
            and_(
                faculty_events_table.c.id == event_id,
                faculty_events_table.c.faculty_id == faculty_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresAcademicEventRepository(AcademicEventRepository):
    """PostgreSQL implementation of AcademicEventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def search(
        self,
        start_from: Optional[date] = None,
        start_until: Optional[date] = None,
        title_contains: Optional[str] = None,
    ) -> List[AcademicEvent]:
        """Find academic events ordered by start date."""
        stmt = select(academic_events_table)
        if start_from is not None:
            stmt = stmt.where(academic_events_table.c.start_date >= start_from)
        if start_until is not None:
            stmt = stmt.where(academic_events_table.c.start_date <= start_until)
        if title_contains:
            stmt = stmt.where(
                academic_events_table.c.title.ilike(f"%{title_contains}%")
            )
        stmt = stmt.order_by(academic_events_table.c.start_date)

        result = await self.session.execute(stmt)
        return [row_to_academic_event(row._asdict()) for row in result.fetchall()]

    async def save(self, event: AcademicEvent) -> AcademicEvent:
        stmt = insert(academic_events_table).values(**model_to_dict(event))
        await self.session.execute(stmt)
        await self.session.flush()
        return event

    async def delete(self, event_id: AcademicEventId) -> bool:
        stmt = delete(academic_events_table).where(
            academic_events_table.c.id == event_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
