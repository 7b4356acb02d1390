"""PostgreSQL repository implementations."""

from acadly.persistence.repository.calendar import (
    PostgresAcademicEventRepository,
    PostgresFacultyCalendarRepository,
    PostgresFacultyEventRepository,
)
from acadly.persistence.repository.comment import PostgresCommentRepository
from acadly.persistence.repository.notification import PostgresNotificationRepository
from acadly.persistence.repository.profile import PostgresProfileRepository
from acadly.persistence.repository.query import PostgresQueryRepository
from acadly.persistence.repository.recommendation import (
    PostgresRecommendationRepository,
)
from acadly.persistence.repository.upvote import PostgresUpvoteRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresRecommendationRepository",
    "PostgresCommentRepository",
    "PostgresUpvoteRepository",
    "PostgresQueryRepository",
    "PostgresNotificationRepository",
    "PostgresFacultyCalendarRepository",
    "PostgresFacultyEventRepository",
    "PostgresAcademicEventRepository",
]
