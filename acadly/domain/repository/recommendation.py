"""Recommendation repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from acadly.domain.model import Recommendation
from acadly.domain.value import ProfileId, RecommendationId


class RecommendationRepository(ABC):
    """Repository for Recommendation entity."""

    @abstractmethod
    async def find_by_id(
        self, recommendation_id: RecommendationId
    ) -> Optional[Recommendation]:
        """Find a recommendation by ID.

        Args:
            recommendation_id: The recommendation's unique identifier

        Returns:
            The recommendation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: Optional[int] = None) -> List[Recommendation]:
        """Find recommendations, newest first.

        Args:
            limit: Maximum number to return (None for all)

        Returns:
            Recommendations ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, recommendation: Recommendation) -> Recommendation:
        """Save a new recommendation."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all recommendations."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: ProfileId) -> int:
        """Count recommendations written by a profile."""
        pass
