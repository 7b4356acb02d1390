"""Academic calendar use cases."""

from .academic_events import (
    AcademicEventInfo,
    CreateAcademicEventRequest,
    CreateAcademicEventUseCase,
    DeleteAcademicEventRequest,
    DeleteAcademicEventUseCase,
    ListAcademicEventsRequest,
    ListAcademicEventsUseCase,
)

__all__ = [
    "AcademicEventInfo",
    "CreateAcademicEventRequest",
    "CreateAcademicEventUseCase",
    "DeleteAcademicEventRequest",
    "DeleteAcademicEventUseCase",
    "ListAcademicEventsRequest",
    "ListAcademicEventsUseCase",
]
