"""Get recommendation use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.domain.error import NotFoundError
from acadly.domain.service import (
    CommentService,
    ProfileService,
    RecommendationService,
    UpvoteService,
)
from acadly.domain.value import ProfileId, RecommendationCategory, RecommendationId


class CommentInfo(BaseModel):
    """Comment with its author's name."""

    id: str
    content: str
    author_id: str
    author_name: str | None
    recommendation_id: str
    created_at: datetime


class GetRecommendationRequest(BaseModel):
    """Get recommendation request."""

    recommendation_id: str  # UUID string
    viewer_id: str  # Profile ID from authenticated user


class GetRecommendationResponse(BaseModel):
    """Recommendation detail with comments."""

    id: str
    title: str
    category: RecommendationCategory
    rating: int
    location: str | None
    description: str
    author_id: str
    author_name: str | None
    created_at: datetime
    comments: list[CommentInfo]
    upvote_count: int
    has_upvoted: bool


class GetRecommendationUseCase:
    """Use case for viewing one recommendation and its discussion."""

    def __init__(
        self,
        recommendation_service: RecommendationService,
        comment_service: CommentService,
        upvote_service: UpvoteService,
        profile_service: ProfileService,
    ) -> None:
        self.recommendation_service = recommendation_service
        self.comment_service = comment_service
        self.upvote_service = upvote_service
        self.profile_service = profile_service

    async def execute(
        self, request: GetRecommendationRequest
    ) -> GetRecommendationResponse:
        """Execute get recommendation flow.

        Args:
            request: Recommendation and viewer IDs

        Returns:
            Recommendation detail, comments newest first

        Raises:
            NotFoundError: If the recommendation does not exist
        """
        recommendation_id = RecommendationId(UUID(request.recommendation_id))
        viewer_id = ProfileId(UUID(request.viewer_id))

        rec = await self.recommendation_service.get_by_id(recommendation_id)
        if not rec:
            raise NotFoundError("Recommendation", request.recommendation_id)

        comments = await self.comment_service.get_comments(recommendation_id)
        names = await self.profile_service.get_names(
            [rec.author_id, *(comment.author_id for comment in comments)]
        )
        upvote_count = await self.upvote_service.count_for_recommendation(
            recommendation_id
        )
        upvoted = await self.upvote_service.get_user_upvotes(
            viewer_id, [recommendation_id]
        )

        return GetRecommendationResponse(
            id=str(rec.id),
            title=rec.title,
            category=rec.category,
            rating=rec.rating,
            location=rec.location,
            description=rec.description,
            author_id=str(rec.author_id),
            author_name=names.get(rec.author_id),
            created_at=rec.created_at,
            comments=[
                CommentInfo(
                    id=str(comment.id),
                    content=comment.content,
                    author_id=str(comment.author_id),
                    author_name=names.get(comment.author_id),
                    recommendation_id=str(comment.recommendation_id),
                    created_at=comment.created_at,
                )
                for comment in comments
            ],
            upvote_count=upvote_count,
            has_upvoted=upvoted.get(recommendation_id, False),
        )
