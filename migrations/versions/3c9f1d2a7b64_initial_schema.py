"""initial_schema

Create the schema for ACADLY:
- Profiles (role and points ledger)
- Recommendations with comments and upvotes
- Queries (faculty questions answered by HOD/Dean/Superadmin)
- Faculty calendars and personal faculty events
- Academic calendar events
- Notifications

Revision ID: 3c9f1d2a7b64
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9f1d2a7b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUM_TYPES = {
    "role": ("faculty", "hod", "dean", "superadmin"),
    "recommendation_category": (
        "Teaching",
        "Research",
        "Conference",
        "Book",
        "Tool",
        "Course",
        "Workshop",
        "Resource",
        "Restaurant",
        "School",
        "Healthcare",
        "Housing",
        "Recreation",
        "Shopping",
        "Service",
        "Other",
    ),
    "query_type": (
        "Academic",
        "Administrative",
        "Infrastructure",
        "IT Support",
        "Policy",
        "Research",
        "Other",
    ),
    "query_status": ("open", "in_progress", "resolved"),
    "academic_event_category": (
        "Exam",
        "Holiday",
        "Workshop",
        "Seminar",
        "Conference",
        "Meeting",
        "Deadline",
        "Cultural",
        "Sports",
        "Other",
    ),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _created_at_column(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        _id_column(),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", _enum("role"), nullable=False, server_default="faculty"),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_profiles_email"),
        sa.CheckConstraint("points >= 0", name="points_non_negative"),
    )
    op.create_index(
        "idx_profiles_points", "profiles", [sa.text("points DESC")]
    )

    # ========================================================================
    # RECOMMENDATIONS table
    # ========================================================================
    op.create_table(
        "recommendations",
        _id_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("category", _enum("recommendation_category"), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )
    op.create_index(
        "idx_recommendations_created_at",
        "recommendations",
        [sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_recommendations_author_id", "recommendations", ["author_id"]
    )

    # ========================================================================
    # RECOMMENDATION_COMMENTS table
    # ========================================================================
    op.create_table(
        "recommendation_comments",
        _id_column(),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("recommendation_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["recommendation_id"], ["recommendations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_recommendation_id",
        "recommendation_comments",
        ["recommendation_id"],
    )

    # ========================================================================
    # RECOMMENDATION_UPVOTES table
    # ========================================================================
    op.create_table(
        "recommendation_upvotes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("recommendation_id", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["recommendation_id"], ["recommendations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        # At most one upvote per (user, recommendation)
        sa.UniqueConstraint("user_id", "recommendation_id", name="unique_upvote"),
    )
    op.create_index(
        "idx_upvotes_recommendation_id",
        "recommendation_upvotes",
        ["recommendation_id"],
    )

    # ========================================================================
    # QUERIES table
    # ========================================================================
    op.create_table(
        "queries",
        _id_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", _enum("query_type"), nullable=False),
        sa.Column(
            "status", _enum("query_status"), nullable=False, server_default="open"
        ),
        sa.Column("response", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("responder_id", sa.UUID(), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["responder_id"], ["profiles.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_queries_created_at", "queries", [sa.text("created_at DESC")])
    op.create_index("idx_queries_author_id", "queries", ["author_id"])
    op.create_index("idx_queries_status", "queries", ["status"])

    # ========================================================================
    # FACULTY_CALENDARS and FACULTY_EVENTS tables
    # ========================================================================
    op.create_table(
        "faculty_calendars",
        _id_column(),
        sa.Column("faculty_id", sa.UUID(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False),
        _created_at_column("uploaded_at"),
        sa.ForeignKeyConstraint(["faculty_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_faculty_calendars_faculty_id", "faculty_calendars", ["faculty_id"]
    )

    op.create_table(
        "faculty_events",
        _id_column(),
        sa.Column("faculty_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("reminder_date", sa.Date(), nullable=True),
        _created_at_column(),
        sa.ForeignKeyConstraint(["faculty_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_faculty_events_faculty_date",
        "faculty_events",
        ["faculty_id", "event_date"],
    )

    # ========================================================================
    # ACADEMIC_EVENTS table
    # ========================================================================
    op.create_table(
        "academic_events",
        _id_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("category", _enum("academic_event_category"), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _created_at_column(),
        sa.ForeignKeyConstraint(["created_by"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_academic_events_start_date", "academic_events", ["start_date"]
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        _created_at_column(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_created",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("academic_events")
    op.drop_table("faculty_events")
    op.drop_table("faculty_calendars")
    op.drop_table("queries")
    op.drop_table("recommendation_upvotes")
    op.drop_table("recommendation_comments")
    op.drop_table("recommendations")
    op.drop_table("profiles")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
