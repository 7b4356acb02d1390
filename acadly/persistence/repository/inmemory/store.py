"""Shared backing store for in-memory repositories.

One store stands in for one database: repositories built on the same store
see each other's writes.
"""

from dataclasses import dataclass, field

from acadly.domain.model import (
    AcademicEvent,
    Comment,
    FacultyCalendar,
    FacultyEvent,
    Notification,
    Profile,
    Query,
    Recommendation,
    Upvote,
)
from acadly.domain.value import (
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


@dataclass
class InMemoryStore:
    """Tables of the in-memory database, keyed by entity ID."""

    profiles: dict[ProfileId, Profile] = field(default_factory=dict)
    recommendations: dict[RecommendationId, Recommendation] = field(
        default_factory=dict
    )
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    upvotes: dict[UpvoteId, Upvote] = field(default_factory=dict)
    queries: dict[QueryId, Query] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
    faculty_calendars: dict[FacultyCalendarId, FacultyCalendar] = field(
        default_factory=dict
    )
    faculty_events: dict[FacultyEventId, FacultyEvent] = field(default_factory=dict)
    academic_events: dict[AcademicEventId, AcademicEvent] = field(
        default_factory=dict
    )
