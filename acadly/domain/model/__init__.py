"""Domain model entities for ACADLY."""

from acadly.domain.model.calendar import AcademicEvent, FacultyCalendar, FacultyEvent
from acadly.domain.model.comment import Comment
from acadly.domain.model.notification import Notification
from acadly.domain.model.profile import Profile
from acadly.domain.model.query import Query
from acadly.domain.model.recommendation import Recommendation
from acadly.domain.model.upvote import Upvote

__all__ = [
    "Profile",
    "Recommendation",
    "Comment",
    "Upvote",
    "Query",
    "Notification",
    "FacultyCalendar",
    "FacultyEvent",
    "AcademicEvent",
]
