"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.domain.service import CommentService, ProfileService
from acadly.domain.value import ProfileId, RecommendationId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    recommendation_id: str  # UUID string
    content: str
    author_id: str  # Profile ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: str
    content: str
    author_id: str
    recommendation_id: str
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a recommendation."""

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Comment details

        Returns:
            Created comment

        Raises:
            NotFoundError: If the recommendation does not exist
        """
        author = await self.profile_service.get_by_id(
            ProfileId(UUID(request.author_id))
        )
        comment = await self.comment_service.create_comment(
            recommendation_id=RecommendationId(UUID(request.recommendation_id)),
            author=author,
            content=request.content,
        )
        return CreateCommentResponse(
            id=str(comment.id),
            content=comment.content,
            author_id=str(comment.author_id),
            recommendation_id=str(comment.recommendation_id),
            created_at=comment.created_at,
        )
