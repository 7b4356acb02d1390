"""Strongly typed identifiers for ACADLY domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

ProfileId = NewType("ProfileId", UUID)
RecommendationId = NewType("RecommendationId", UUID)
CommentId = NewType("CommentId", UUID)
UpvoteId = NewType("UpvoteId", UUID)
QueryId = NewType("QueryId", UUID)
NotificationId = NewType("NotificationId", UUID)
FacultyCalendarId = NewType("FacultyCalendarId", UUID)
FacultyEventId = NewType("FacultyEventId", UUID)
AcademicEventId = NewType("AcademicEventId", UUID)
