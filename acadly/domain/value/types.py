"""Domain value types for ACADLY.

Enumerations shared by models, request validation and persistence.
"""

from enum import Enum


class Role(str, Enum):
    """Profile role, ordered from least to most privileged."""

    FACULTY = "faculty"
    HOD = "hod"
    DEAN = "dean"
    SUPERADMIN = "superadmin"


class RecommendationCategory(str, Enum):
    """Category of a recommendation."""

    TEACHING = "Teaching"
    RESEARCH = "Research"
    CONFERENCE = "Conference"
    BOOK = "Book"
    TOOL = "Tool"
    COURSE = "Course"
    WORKSHOP = "Workshop"
    RESOURCE = "Resource"
    RESTAURANT = "Restaurant"
    SCHOOL = "School"
    HEALTHCARE = "Healthcare"
    HOUSING = "Housing"
    RECREATION = "Recreation"
    SHOPPING = "Shopping"
    SERVICE = "Service"
    OTHER = "Other"


class QueryType(str, Enum):
    """Kind of query raised by a faculty member."""

    ACADEMIC = "Academic"
    ADMINISTRATIVE = "Administrative"
    INFRASTRUCTURE = "Infrastructure"
    IT_SUPPORT = "IT Support"
    POLICY = "Policy"
    RESEARCH = "Research"
    OTHER = "Other"


class QueryStatus(str, Enum):
    """Lifecycle status of a query.

    Queries start open. Responders may move them to any status; there is
    no terminal state.
    """

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class AcademicEventCategory(str, Enum):
    """Category of an academic calendar event."""

    EXAM = "Exam"
    HOLIDAY = "Holiday"
    WORKSHOP = "Workshop"
    SEMINAR = "Seminar"
    CONFERENCE = "Conference"
    MEETING = "Meeting"
    DEADLINE = "Deadline"
    CULTURAL = "Cultural"
    SPORTS = "Sports"
    OTHER = "Other"


class ActivityType(str, Enum):
    """Kind of item shown in the dashboard activity feed."""

    RECOMMENDATION = "recommendation"
    QUERY = "query"
