"""Recommendation domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from acadly.domain.model import Recommendation
from acadly.domain.repository import RecommendationRepository
from acadly.domain.value import ProfileId, RecommendationCategory, RecommendationId

from .base import Service
from .profile_service import ProfileService


class RecommendationService(Service):
    """Domain service for recommendation operations."""

    def __init__(
        self,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        points_awarded: int,
    ) -> None:
        """Initialize recommendation service.

        Args:
            recommendation_repository: Recommendation repository
            profile_service: Profile domain service (points ledger)
            points_awarded: Points credited to the author on creation
        """
        self.recommendation_repository = recommendation_repository
        self.profile_service = profile_service
        self.points_awarded = points_awarded

    async def create_recommendation(
        self,
        author_id: ProfileId,
        title: str,
        category: RecommendationCategory,
        description: str,
        rating: int = 5,
        location: str | None = None,
    ) -> Recommendation:
        """Create a recommendation and credit its author.

        Args:
            author_id: Author profile ID
            title: Recommendation title
            category: Recommendation category
            description: Description text
            rating: Rating from 1 to 5
            location: Optional location

        Returns:
            Created recommendation
        """
        with logfire.span(
            "recommendation_service.create_recommendation",
            author_id=str(author_id),
            category=category.value,
        ):
            recommendation = Recommendation(
                id=RecommendationId(uuid4()),
                title=title,
                category=category,
                rating=rating,
                location=location,
                description=description,
                author_id=author_id,
                created_at=datetime.now(),
            )
            saved = await self.recommendation_repository.save(recommendation)

            await self.profile_service.award_points(author_id, self.points_awarded)

            logfire.info(
                "Recommendation created",
                recommendation_id=str(saved.id),
                author_id=str(author_id),
            )
            return saved

    async def get_by_id(
        self, recommendation_id: RecommendationId
    ) -> Recommendation | None:
        """Get a recommendation by ID.

        Args:
            recommendation_id: Recommendation ID

        Returns:
            Recommendation if found, None otherwise
        """
        with logfire.span(
            "recommendation_service.get_by_id",
            recommendation_id=str(recommendation_id),
        ):
            recommendation = await self.recommendation_repository.find_by_id(
                recommendation_id
            )
            if not recommendation:
                logfire.warn(
                    "Recommendation not found",
                    recommendation_id=str(recommendation_id),
                )
            return recommendation

    async def list_recent(self, limit: int | None = None) -> list[Recommendation]:
        return await self.recommendation_repository.find_recent(limit)

    async def count(self) -> int:
        return await self.recommendation_repository.count()

    async def count_by_author(self, author_id: ProfileId) -> int:
        return await self.recommendation_repository.count_by_author(author_id)
