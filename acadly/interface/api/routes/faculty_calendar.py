"""Faculty calendar routes."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.calendar import (
    CreateFacultyEventRequest,
    CreateFacultyEventUseCase,
    DeleteCalendarUseCase,
    DeleteFacultyEventUseCase,
    DeleteOwnedItemRequest,
    FacultyCalendarInfo,
    FacultyCalendarResponse,
    FacultyEventInfo,
    GetFacultyCalendarUseCase,
    UploadCalendarRequest,
    UploadCalendarUseCase,
)
from acadly.application.usecase.common import MessageResponse
from acadly.interface.api.session import require_profile

router = APIRouter(prefix="/api", tags=["faculty-calendar"], route_class=DishkaRoute)


class UploadCalendarAPIRequest(BaseModel):
    """API request for uploading a timetable image (data URL or base64)."""

    image: str | None = None


class CreateFacultyEventAPIRequest(BaseModel):
    """API request for adding a personal event."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    event_date: date
    reminder_date: date | None = None


@router.get("/faculty-calendar", response_model=FacultyCalendarResponse)
async def get_faculty_calendar(
    get_faculty_calendar_use_case: FromDishka[GetFacultyCalendarUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FacultyCalendarResponse:
    """The caller's uploaded calendars and personal events."""
    faculty = await require_profile(get_current_user_use_case, auth_token)
    return await get_faculty_calendar_use_case.execute(faculty.id)


@router.post(
    "/faculty-calendar/upload",
    response_model=FacultyCalendarInfo,
    status_code=status.HTTP_201_CREATED,
)
async def upload_calendar(
    request: UploadCalendarAPIRequest,
    upload_calendar_use_case: FromDishka[UploadCalendarUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FacultyCalendarInfo:
    """Upload a calendar image.

    Raises:
        ValidationError: If no image data was sent (400)
    """
    faculty = await require_profile(get_current_user_use_case, auth_token)
    return await upload_calendar_use_case.execute(
        UploadCalendarRequest(image=request.image, faculty_id=faculty.id)
    )


@router.delete("/faculty-calendar/{calendar_id}", response_model=MessageResponse)
async def delete_calendar(
    calendar_id: UUID,
    delete_calendar_use_case: FromDishka[DeleteCalendarUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete one of the caller's calendars. Other owners' rows are untouched."""
    faculty = await require_profile(get_current_user_use_case, auth_token)
    return await delete_calendar_use_case.execute(
        DeleteOwnedItemRequest(item_id=str(calendar_id), faculty_id=faculty.id)
    )


@router.post(
    "/faculty-events",
    response_model=FacultyEventInfo,
    status_code=status.HTTP_201_CREATED,
)
async def create_faculty_event(
    request: CreateFacultyEventAPIRequest,
    create_faculty_event_use_case: FromDishka[CreateFacultyEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> FacultyEventInfo:
    """Add a personal event to the caller's calendar."""
    faculty = await require_profile(get_current_user_use_case, auth_token)
    return await create_faculty_event_use_case.execute(
        CreateFacultyEventRequest(
            title=request.title,
            description=request.description,
            event_date=request.event_date,
            reminder_date=request.reminder_date,
            faculty_id=faculty.id,
        )
    )


@router.delete("/faculty-events/{event_id}", response_model=MessageResponse)
async def delete_faculty_event(
    event_id: UUID,
    delete_faculty_event_use_case: FromDishka[DeleteFacultyEventUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MessageResponse:
    """Delete one of the caller's personal events."""
    faculty = await require_profile(get_current_user_use_case, auth_token)
    return await delete_faculty_event_use_case.execute(
        DeleteOwnedItemRequest(item_id=str(event_id), faculty_id=faculty.id)
    )
