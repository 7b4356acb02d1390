"""Recommendation entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import ProfileId, RecommendationCategory, RecommendationId


class Recommendation(DomainModel):
    """A resource, event or place recommended by a faculty member.

    Immutable once created; comment and upvote counts are derived at read time.
    """

    id: RecommendationId
    title: str = Field(min_length=3, max_length=255)
    category: RecommendationCategory
    rating: int = Field(default=5, ge=1, le=5)
    location: Optional[str] = Field(default=None, max_length=255)
    description: str = Field(min_length=10)
    author_id: ProfileId
    created_at: datetime = Field(default_factory=datetime.now)
