"""Domain value objects for ACADLY."""

from acadly.domain.value.identifiers import (
    AcademicEventId,
    CommentId,
    FacultyCalendarId,
    FacultyEventId,
    NotificationId,
    ProfileId,
    QueryId,
    RecommendationId,
    UpvoteId,
)
from acadly.domain.value.types import (
    AcademicEventCategory,
    ActivityType,
    QueryStatus,
    QueryType,
    RecommendationCategory,
    Role,
)

__all__ = [
    # Identifiers
    "ProfileId",
    "RecommendationId",
    "CommentId",
    "UpvoteId",
    "QueryId",
    "NotificationId",
    "FacultyCalendarId",
    "FacultyEventId",
    "AcademicEventId",
    # Types
    "Role",
    "RecommendationCategory",
    "QueryType",
    "QueryStatus",
    "AcademicEventCategory",
    "ActivityType",
]
