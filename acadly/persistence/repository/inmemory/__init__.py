"""In-memory repository implementations for testing."""

from .calendar import (
    InMemoryAcademicEventRepository,
    InMemoryFacultyCalendarRepository,
    InMemoryFacultyEventRepository,
)
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .profile import InMemoryProfileRepository
from .query import InMemoryQueryRepository
from .recommendation import InMemoryRecommendationRepository
from .store import InMemoryStore
from .upvote import InMemoryUpvoteRepository

__all__ = [
    "InMemoryAcademicEventRepository",
    "InMemoryCommentRepository",
    "InMemoryFacultyCalendarRepository",
    "InMemoryFacultyEventRepository",
    "InMemoryNotificationRepository",
    "InMemoryProfileRepository",
    "InMemoryQueryRepository",
    "InMemoryRecommendationRepository",
    "InMemoryStore",
    "InMemoryUpvoteRepository",
]
