"""Academic calendar routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from acadly.application.usecase.academic_event import (
    AcademicEventInfo,
    CreateAcademicEventRequest,
    CreateAcademicEventUseCase,
    DeleteAcademicEventRequest,
    DeleteAcademicEventUseCase,
    ListAcademicEventsRequest,
    ListAcademicEventsUseCase,
)
from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.common import MessageResponse
from acadly.domain.value import AcademicEventCategory
from acadly.interface.api.session import require_profile

router = APIRouter(
    prefix="/api/academic-events", tags=["academic-events"], route_class=DishkaRoute
)


class CreateAcademicEventAPIRequest(BaseModel):
    """API request for publishing an academic calendar event."""

    title: str = Field(min_length=2, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    start_date: date
    end_date: date | None = None
    category: AcademicEventCategory


@router.get("", response_model=list[AcademicEventInfo])
async def list_academic_events(
    list_academic_events_use_case: FromDishka[ListAcademicEventsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
    month: str | None = Query(default=None, description="Month filter, YYYY-MM"),
    search: str | None = Query(default=None, description="Title substring"),
) -> list[AcademicEventInfo]:
    """List academic events ordered by start date.

    Raises:
        ValidationError: If month is not YYYY-MM (400)
    """
    await require_profile(get_current_user_use_case, auth_token)
    return await list_academic_events_use_case.execute(
        ListAcademicEventsRequest(month=month, search=search)
    )


@router.post(
    "", response_model=AcademicEventInfo, status_code=status.HTTP_201_CREATED
)
async def create_academic_event(
    request: CreateAcademicEventAPIRequest,
    create_academic_event_use_case: FromDishka[CreateAcademicEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AcademicEventInfo:
    """Publish an academic event and notify every other profile.

    Superadmin only.

    Raises:
        NotAuthorizedError: If the caller is not a superadmin (403)
    """
    creator = await require_profile(get_current_user_use_case, auth_token)
    return await create_academic_event_use_case.execute(
        CreateAcademicEventRequest(
            title=request.title,
            description=request.description,
            start_date=request.start_date,
            end_date=request.end_date,
            category=request.category,
            creator_id=creator.id,
        )
    )


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_academic_event(
    event_id: UUID,
    delete_academic_event_use_case: FromDishka[DeleteAcademicEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete an academic event. Superadmin only."""
    actor = await require_profile(get_current_user_use_case, auth_token)
    return await delete_academic_event_use_case.execute(
        DeleteAcademicEventRequest(event_id=str(event_id), actor_id=actor.id)
    )
