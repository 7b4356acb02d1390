"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from enum import Enum
from typing import Any, Dict
from uuid import UUID

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
from acadly.domain.model.common import DomainModel
from acadly.domain.value import (
    AcademicEventCategory,
    AcademicEventId,
    CommentId,
    FacultyCalendarId,
    FacultyEventId,
    NotificationId,
    ProfileId,
    QueryId,
    QueryStatus,
    QueryType,
    RecommendationCategory,
    RecommendationId,
    Role,
    UpvoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def model_to_dict(model: DomainModel) -> Dict[str, Any]:
    """Convert a domain model to a database dict.

    Enum members are stored by value.

    Args:
        model: Domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in model.model_dump().items()
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        full_name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        points=row["points"],
        created_at=row["created_at"],
    )


def row_to_recommendation(row: Dict[str, Any]) -> Recommendation:
    """Convert database row to Recommendation domain model."""
    return Recommendation(
        id=RecommendationId(_uuid(row["id"])),
        title=row["title"],
        category=RecommendationCategory(row["category"]),
        rating=row["rating"],
        location=row.get("location"),
        description=row["description"],
        author_id=ProfileId(_uuid(row["author_id"])),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        author_id=ProfileId(_uuid(row["author_id"])),
        recommendation_id=RecommendationId(_uuid(row["recommendation_id"])),
        created_at=row["created_at"],
    )


def row_to_upvote(row: Dict[str, Any]) -> Upvote:
    """Convert database row to Upvote domain model."""
    return Upvote(
        id=UpvoteId(_uuid(row["id"])),
        user_id=ProfileId(_uuid(row["user_id"])),
        recommendation_id=RecommendationId(_uuid(row["recommendation_id"])),
        created_at=row["created_at"],
    )


def row_to_query(row: Dict[str, Any]) -> Query:
    """Convert database row to Query domain model."""
    responder_id = _optional_uuid(row.get("responder_id"))
    return Query(
        id=QueryId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        type=QueryType(row["type"]),
        status=QueryStatus(row["status"]),
        response=row.get("response"),
        author_id=ProfileId(_uuid(row["author_id"])),
        responder_id=ProfileId(responder_id) if responder_id else None,
        created_at=row["created_at"],
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=ProfileId(_uuid(row["user_id"])),
        title=row["title"],
        message=row["message"],
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def row_to_faculty_calendar(row: Dict[str, Any]) -> FacultyCalendar:
    return FacultyCalendar(
        id=FacultyCalendarId(_uuid(row["id"])),
        faculty_id=ProfileId(_uuid(row["faculty_id"])),
        image=row["image"],
        uploaded_at=row["uploaded_at"],
    )


def row_to_faculty_event(row: Dict[str, Any]) -> FacultyEvent:
    return FacultyEvent(
        id=FacultyEventId(_uuid(row["id"])),
        faculty_id=ProfileId(_uuid(row["faculty_id"])),
        title=row["title"],
        description=row.get("description"),
        event_date=row["event_date"],
        reminder_date=row.get("reminder_date"),
        created_at=row["created_at"],
    )


def row_to_academic_event(row: Dict[str, Any]) -> AcademicEvent:
    return AcademicEvent(
        id=AcademicEventId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        category=AcademicEventCategory(row["category"]),
        created_by=ProfileId(_uuid(row["created_by"])),
        created_at=row["created_at"],
    )
