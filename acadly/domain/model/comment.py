"""Comment entity.

Comments are flat replies to a recommendation and are removed together
with it.
"""

from datetime import datetime

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import CommentId, ProfileId, RecommendationId


class Comment(DomainModel):
    """Comment on a recommendation."""

    id: CommentId
    content: str = Field(min_length=1)
    author_id: ProfileId
    recommendation_id: RecommendationId
    created_at: datetime = Field(default_factory=datetime.now)
