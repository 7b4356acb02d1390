"""Academic calendar use cases."""

from datetime import date, datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from acadly.application.usecase.common import MessageResponse
from acadly.domain.model import AcademicEvent
from acadly.domain.service import (
    AcademicEventService,
    AccessPolicy,
    Capability,
    ProfileService,
)
from acadly.domain.value import AcademicEventCategory, AcademicEventId, ProfileId


class AcademicEventInfo(BaseModel):
    """Academic event with its creator's name."""

    id: str
    title: str
    description: str | None
    start_date: date
    end_date: date | None
    category: AcademicEventCategory
    created_by: str
    creator_name: str | None
    created_at: datetime

    @classmethod
    def from_event(
        cls, event: AcademicEvent, creator_name: str | None
    ) -> "AcademicEventInfo":
        return cls(
            id=str(event.id),
            title=event.title,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            category=event.category,
            created_by=str(event.created_by),
            creator_name=creator_name,
            created_at=event.created_at,
        )


class ListAcademicEventsRequest(BaseModel):
    """List academic events request."""

    month: str | None = None  # YYYY-MM
    search: str | None = None


class CreateAcademicEventRequest(BaseModel):
    """Create academic event request."""

    title: str
    description: str | None = None
    start_date: date
    end_date: date | None = None
    category: AcademicEventCategory
    creator_id: str  # Profile ID from authenticated user


class DeleteAcademicEventRequest(BaseModel):
    """Delete academic event request."""

    event_id: str  # UUID string
    actor_id: str  # Profile ID from authenticated user


class ListAcademicEventsUseCase:
    """Use case for browsing the academic calendar."""

    def __init__(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
    ) -> None:
        self.academic_event_service = academic_event_service
        self.profile_service = profile_service

    async def execute(
        self, request: ListAcademicEventsRequest
    ) -> list[AcademicEventInfo]:
        """Execute list flow.

        Args:
            request: Optional month and title filters

        Returns:
            Events ordered by start date

        Raises:
            ValidationError: If month is not YYYY-MM
        """
        events = await self.academic_event_service.search(
            month=request.month, search=request.search
        )
        names = await self.profile_service.get_names([e.created_by for e in events])
        return [AcademicEventInfo.from_event(e, names.get(e.created_by)) for e in events]


class CreateAcademicEventUseCase:
    """Use case for publishing an academic event (superadmin only)."""

    def __init__(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize create academic event use case.

        Args:
            academic_event_service: Academic event domain service
            profile_service: Profile domain service
            access_policy: Role capability policy
        """
        self.academic_event_service = academic_event_service
        self.profile_service = profile_service
        self.access_policy = access_policy

    async def execute(self, request: CreateAcademicEventRequest) -> AcademicEventInfo:
        """Execute create flow.

        Every other profile is notified in one batch.

        Raises:
            NotAuthorizedError: If the creator is not a superadmin
        """
        with logfire.span("create_academic_event.execute"):
            creator = await self.profile_service.get_by_id(
                ProfileId(UUID(request.creator_id))
            )
            self.access_policy.require(creator, Capability.MANAGE_ACADEMIC_EVENTS)

            event = await self.academic_event_service.create_event(
                creator=creator,
                title=request.title,
                start_date=request.start_date,
                category=request.category,
                description=request.description,
                end_date=request.end_date,
            )
            return AcademicEventInfo.from_event(event, creator.full_name)


class DeleteAcademicEventUseCase:
    """Use case for removing an academic event (superadmin only)."""

    def __init__(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> None:
        self.academic_event_service = academic_event_service
        self.profile_service = profile_service
        self.access_policy = access_policy

    async def execute(self, request: DeleteAcademicEventRequest) -> MessageResponse:
        """Execute delete flow.

        Raises:
            NotAuthorizedError: If the actor is not a superadmin
        """
        actor = await self.profile_service.get_by_id(ProfileId(UUID(request.actor_id)))
        self.access_policy.require(actor, Capability.MANAGE_ACADEMIC_EVENTS)

        await self.academic_event_service.delete_event(
            AcademicEventId(UUID(request.event_id))
        )
        return MessageResponse(message="Event deleted")
