"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire
import pytest

from acadly.domain.model import Profile, Recommendation
from acadly.domain.value import (
    ProfileId,
    RecommendationCategory,
    RecommendationId,
    Role,
)


@pytest.fixture(autouse=True, scope="session")
def _quiet_logfire():
    """Keep telemetry local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_profile(
    full_name: str = "Prof. Test Faculty",
    role: Role = Role.FACULTY,
    points: int = 0,
    email: str | None = None,
) -> Profile:
    """Helper to build a profile with sensible defaults.

    Args:
        full_name: Display name
        role: Profile role
        points: Starting points
        email: Login email (unique one generated if omitted)

    Returns:
        Unsaved Profile
    """
    profile_id = ProfileId(uuid4())
    return Profile(
        id=profile_id,
        full_name=full_name,
        email=email or f"{str(profile_id)[:8]}@acadly.edu",
        password_hash="not-a-real-hash",
        role=role,
        points=points,
        created_at=datetime.now(),
    )


def make_recommendation(
    author_id: ProfileId, title: str = "Research Methodology Workshop"
) -> Recommendation:
    """Helper to build a recommendation authored by a profile."""
    return Recommendation(
        id=RecommendationId(uuid4()),
        title=title,
        category=RecommendationCategory.WORKSHOP,
        rating=4,
        location="Seminar Hall B",
        description="A three day workshop on research methods and publishing.",
        author_id=author_id,
        created_at=datetime.now(),
    )
