"""List recommendations use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from acadly.domain.service import (
    CommentService,
    ProfileService,
    RecommendationService,
    UpvoteService,
)
from acadly.domain.value import ProfileId, RecommendationCategory


class RecommendationListItem(BaseModel):
    """Recommendation with author name and engagement counts."""

    id: str
    title: str
    category: RecommendationCategory
    rating: int
    location: str | None
    description: str
    author_id: str
    author_name: str | None
    created_at: datetime
    comment_count: int
    upvote_count: int
    has_upvoted: bool


class ListRecommendationsRequest(BaseModel):
    """List recommendations request."""

    viewer_id: str  # Profile ID from authenticated user


class ListRecommendationsUseCase:
    """Use case for listing all recommendations, newest first."""

    def __init__(
        self,
        recommendation_service: RecommendationService,
        comment_service: CommentService,
        upvote_service: UpvoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize list recommendations use case.

        Args:
            recommendation_service: Recommendation domain service
            comment_service: Comment domain service
            upvote_service: Upvote domain service
            profile_service: Profile domain service
        """
        self.recommendation_service = recommendation_service
        self.comment_service = comment_service
        self.upvote_service = upvote_service
        self.profile_service = profile_service

    async def execute(
        self, request: ListRecommendationsRequest
    ) -> list[RecommendationListItem]:
        """Execute list recommendations flow.

        Counts and author names are fetched in batch, not per item.

        Args:
            request: Request with the viewer's ID

        Returns:
            Recommendations, newest first
        """
        with logfire.span("list_recommendations.execute"):
            viewer_id = ProfileId(UUID(request.viewer_id))
            recommendations = await self.recommendation_service.list_recent()
            ids = [rec.id for rec in recommendations]

            names = await self.profile_service.get_names(
                [rec.author_id for rec in recommendations]
            )
            comment_counts = await self.comment_service.count_for_recommendations(ids)
            upvote_counts = await self.upvote_service.count_for_recommendations(ids)
            upvoted = await self.upvote_service.get_user_upvotes(viewer_id, ids)

            items = [
                RecommendationListItem(
                    id=str(rec.id),
                    title=rec.title,
                    category=rec.category,
                    rating=rec.rating,
                    location=rec.location,
                    description=rec.description,
                    author_id=str(rec.author_id),
                    author_name=names.get(rec.author_id),
                    created_at=rec.created_at,
                    comment_count=comment_counts.get(rec.id, 0),
                    upvote_count=upvote_counts.get(rec.id, 0),
                    has_upvoted=upvoted.get(rec.id, False),
                )
                for rec in recommendations
            ]

            logfire.info("Recommendations listed", count=len(items))
            return items
