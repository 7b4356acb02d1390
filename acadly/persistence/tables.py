"""SQLAlchemy table definitions for ACADLY.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from acadly.domain.value import (
    AcademicEventCategory,
    QueryStatus,
    QueryType,
    RecommendationCategory,
    Role,
)

metadata = MetaData()


def _enum(enum_class, name: str) -> postgresql.ENUM:
    return postgresql.ENUM(
        *[member.value for member in enum_class], name=name, create_type=False
    )


role_enum = _enum(Role, "role")
recommendation_category_enum = _enum(RecommendationCategory, "recommendation_category")
query_type_enum = _enum(QueryType, "query_type")
query_status_enum = _enum(QueryStatus, "query_status")
academic_event_category_enum = _enum(AcademicEventCategory, "academic_event_category")

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("full_name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("role", role_enum, nullable=False, server_default="faculty"),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("points >= 0", name="points_non_negative"),
)

Index("idx_profiles_points", profiles_table.c.points.desc())

# ============================================================================
# RECOMMENDATIONS TABLE
# ============================================================================
recommendations_table = Table(
    "recommendations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(255), nullable=False),
    Column("category", recommendation_category_enum, nullable=False),
    Column("rating", Integer, nullable=False, server_default="5"),
    Column("location", String(255), nullable=True),
    Column("description", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
)

Index("idx_recommendations_created_at", recommendations_table.c.created_at.desc())
Index("idx_recommendations_author_id", recommendations_table.c.author_id)

# ============================================================================
# RECOMMENDATION COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "recommendation_comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "recommendation_id",
        UUID,
        ForeignKey("recommendations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_comments_recommendation_id", comments_table.c.recommendation_id)

# ============================================================================
# RECOMMENDATION UPVOTES TABLE
# ============================================================================
upvotes_table = Table(
    "recommendation_upvotes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "recommendation_id",
        UUID,
        ForeignKey("recommendations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("user_id", "recommendation_id", name="unique_upvote"),
)

Index("idx_upvotes_recommendation_id", upvotes_table.c.recommendation_id)

# ============================================================================
# QUERIES TABLE
# ============================================================================
queries_table = Table(
    "queries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False),
    Column("type", query_type_enum, nullable=False),
    Column("status", query_status_enum, nullable=False, server_default="open"),
    Column("response", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "responder_id",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_queries_created_at", queries_table.c.created_at.desc())
Index("idx_queries_author_id", queries_table.c.author_id)
Index("idx_queries_status", queries_table.c.status)

# ============================================================================
# FACULTY CALENDARS TABLE
# ============================================================================
faculty_calendars_table = Table(
    "faculty_calendars",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "faculty_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("image", Text, nullable=False),  # Encoded image, e.g. a data URL
    Column("uploaded_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_faculty_calendars_faculty_id", faculty_calendars_table.c.faculty_id)

# ============================================================================
# FACULTY EVENTS TABLE
# ============================================================================
faculty_events_table = Table(
    "faculty_events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "faculty_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("event_date", Date, nullable=False),
    Column("reminder_date", Date, nullable=True),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index(
    "idx_faculty_events_faculty_date",
    faculty_events_table.c.faculty_id,
    faculty_events_table.c.event_date,
)

# ============================================================================
# ACADEMIC EVENTS TABLE
# ============================================================================
academic_events_table = Table(
    "academic_events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=True),
    Column("category", academic_event_category_enum, nullable=False),
    Column(
        "created_by", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_academic_events_start_date", academic_events_table.c.start_date)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
