"""Repository interfaces for ACADLY domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from acadly.domain.repository.calendar import (
    AcademicEventRepository,
    FacultyCalendarRepository,
    FacultyEventRepository,
)
from acadly.domain.repository.comment import CommentRepository
from acadly.domain.repository.notification import NotificationRepository
from acadly.domain.repository.profile import ProfileRepository
from acadly.domain.repository.query import QueryRepository
from acadly.domain.repository.recommendation import RecommendationRepository
from acadly.domain.repository.upvote import UpvoteRepository

__all__ = [
    "ProfileRepository",
    "RecommendationRepository",
    "CommentRepository",
    "UpvoteRepository",
    "QueryRepository",
    "NotificationRepository",
    "FacultyCalendarRepository",
    "FacultyEventRepository",
    "AcademicEventRepository",
]
