"""Faculty calendar use cases."""

from .faculty_calendar import (
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

__all__ = [
    "CreateFacultyEventRequest",
    "CreateFacultyEventUseCase",
    "DeleteCalendarUseCase",
    "DeleteFacultyEventUseCase",
    "DeleteOwnedItemRequest",
    "FacultyCalendarInfo",
    "FacultyCalendarResponse",
    "FacultyEventInfo",
    "GetFacultyCalendarUseCase",
    "UploadCalendarRequest",
    "UploadCalendarUseCase",
]
