"""Upvote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from acadly.domain.model import Upvote
from acadly.domain.value import ProfileId, RecommendationId


class UpvoteRepository(ABC):
    """Repository for Upvote entity.

    Storage enforces at most one upvote per (user, recommendation).
    """

    @abstractmethod
    async def find_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> Optional[Upvote]:
        """Find a user's upvote on a recommendation.

        Args:
            user_id: The voter's profile ID
            recommendation_id: The recommendation ID

        Returns:
            The upvote if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_recommendations(
        self,
        user_id: ProfileId,
        recommendation_ids: Sequence[RecommendationId],
    ) -> List[Upvote]:
        """Find a user's upvotes on several recommendations (batch query).

        Args:
            user_id: The voter's profile ID
            recommendation_ids: Recommendation IDs to check

        Returns:
            Upvotes by the user on the given recommendations
        """
        pass

    @abstractmethod
    async def save(self, upvote: Upvote) -> Upvote:
        """Save a new upvote.

        The insert is isolated so a failure leaves the surrounding
        transaction usable.

        Args:
            upvote: The upvote to save

        Returns:
            The saved upvote

        Raises:
            IntegrityError: If the user already upvoted the recommendation
        """
        pass

    @abstractmethod
    async def delete_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> bool:
        """Delete a user's upvote on a recommendation.

        Returns:
            True if an upvote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> int:
        """Count upvotes on a recommendation."""
        pass

    @abstractmethod
    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        """Count upvotes for several recommendations (batch query).

        Returns:
            Mapping of recommendation ID to upvote count; IDs without
            upvotes may be absent
        """
        pass
