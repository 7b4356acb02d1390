"""Upvote entity."""

from datetime import datetime

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import ProfileId, RecommendationId, UpvoteId


class Upvote(DomainModel):
    """Upvote on a recommendation.

    Business rules:
    - At most one upvote per (user, recommendation), enforced by a unique
      constraint in storage
    - Toggled on and off; never edited
    """

    id: UpvoteId
    user_id: ProfileId
    recommendation_id: RecommendationId
    created_at: datetime = Field(default_factory=datetime.now)
