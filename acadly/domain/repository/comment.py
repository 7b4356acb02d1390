"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from acadly.domain.model import Comment
from acadly.domain.value import RecommendationId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> List[Comment]:
        """Find all comments on a recommendation, newest first.

        Args:
            recommendation_id: Parent recommendation ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        """Count comments for several recommendations (batch query).

        Args:
            recommendation_ids: Recommendation IDs to count for

        Returns:
            Mapping of recommendation ID to comment count; IDs without
            comments may be absent
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        pass
