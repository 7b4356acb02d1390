"""Domain services."""

from .academic_event_service import AcademicEventService
from .access_policy import AccessPolicy, Capability
from .auth_service import AuthService
from .base import Service
from .calendar_service import CalendarService
from .comment_service import CommentService
from .insights_service import InsightsGenerator, InsightsService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .password_service import PasswordService
from .profile_service import ProfileService
from .query_service import QueryService
from .recommendation_service import RecommendationService
from .upvote_service import UpvoteService

__all__ = [
    "AcademicEventService",
    "AccessPolicy",
    "AuthService",
    "CalendarService",
    "Capability",
    "CommentService",
    "InsightsGenerator",
    "InsightsService",
    "JWTService",
    "NotificationService",
    "PasswordService",
    "ProfileService",
    "QueryService",
    "RecommendationService",
    "Service",
    "UpvoteService",
]
