"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from acadly.domain.error import NotFoundError
from acadly.domain.model import Comment, Profile
from acadly.domain.repository import CommentRepository, RecommendationRepository
from acadly.domain.value import CommentId, RecommendationId

from .base import Service
from .notification_service import NotificationService
from .profile_service import ProfileService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points_awarded: int,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            recommendation_repository: Recommendation repository
            profile_service: Profile domain service (points ledger)
            notification_service: Notification domain service
            points_awarded: Points credited to the commenter
        """
        self.comment_repository = comment_repository
        self.recommendation_repository = recommendation_repository
        self.profile_service = profile_service
        self.notification_service = notification_service
        self.points_awarded = points_awarded

    async def create_comment(
        self,
        recommendation_id: RecommendationId,
        author: Profile,
        content: str,
    ) -> Comment:
        """Comment on a recommendation.

        Credits the commenter and notifies the recommendation's author when
        it is someone else.

        Args:
            recommendation_id: Recommendation being commented on
            author: Commenting profile
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the recommendation does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            recommendation_id=str(recommendation_id),
            author_id=str(author.id),
        ):
            recommendation = await self.recommendation_repository.find_by_id(
                recommendation_id
            )
            if not recommendation:
                logfire.warn(
                    "Comment on non-existent recommendation",
                    recommendation_id=str(recommendation_id),
                )
                raise NotFoundError("Recommendation", str(recommendation_id))

            comment = Comment(
                id=CommentId(uuid4()),
                content=content,
                author_id=author.id,
                recommendation_id=recommendation_id,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)

            await self.profile_service.award_points(author.id, self.points_awarded)

            if recommendation.author_id != author.id:
                await self.notification_service.notify(
                    recommendation.author_id,
                    "New Comment",
                    f'{author.full_name} commented on your recommendation "{recommendation.title}"',
                )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                recommendation_id=str(recommendation_id),
            )
            return saved

    async def get_comments(self, recommendation_id: RecommendationId) -> list[Comment]:
        """Get comments on a recommendation, newest first."""
        with logfire.span(
            "comment_service.get_comments", recommendation_id=str(recommendation_id)
        ):
            comments = await self.comment_repository.find_by_recommendation(
                recommendation_id
            )
            logfire.info(
                "Comments retrieved",
                recommendation_id=str(recommendation_id),
                count=len(comments),
            )
            return comments

    async def count_for_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> dict[RecommendationId, int]:
        """Count comments per recommendation, zero-filled."""
        if not recommendation_ids:
            return {}
        counts = await self.comment_repository.count_by_recommendations(
            recommendation_ids
        )
        return {rid: counts.get(rid, 0) for rid in recommendation_ids}
