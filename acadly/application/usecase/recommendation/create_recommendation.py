"""Create recommendation use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.domain.service import RecommendationService
from acadly.domain.value import ProfileId, RecommendationCategory


class CreateRecommendationRequest(BaseModel):
    """Create recommendation request."""

    title: str
    category: RecommendationCategory
    description: str
    rating: int = 5
    location: str | None = None
    author_id: str  # Profile ID from authenticated user


class RecommendationInfo(BaseModel):
    """Recommendation as stored."""

    id: str
    title: str
    category: RecommendationCategory
    rating: int
    location: str | None
    description: str
    author_id: str
    created_at: datetime


class CreateRecommendationUseCase:
    """Use case for sharing a recommendation."""

    def __init__(self, recommendation_service: RecommendationService) -> None:
        """Initialize create recommendation use case.

        Args:
            recommendation_service: Recommendation domain service
        """
        self.recommendation_service = recommendation_service

    async def execute(self, request: CreateRecommendationRequest) -> RecommendationInfo:
        """Execute create recommendation flow.

        Args:
            request: Recommendation details

        Returns:
            Created recommendation
        """
        recommendation = await self.recommendation_service.create_recommendation(
            author_id=ProfileId(UUID(request.author_id)),
            title=request.title,
            category=request.category,
            description=request.description,
            rating=request.rating,
            location=request.location,
        )
        return RecommendationInfo(
            id=str(recommendation.id),
            title=recommendation.title,
            category=recommendation.category,
            rating=recommendation.rating,
            location=recommendation.location,
            description=recommendation.description,
            author_id=str(recommendation.author_id),
            created_at=recommendation.created_at,
        )
