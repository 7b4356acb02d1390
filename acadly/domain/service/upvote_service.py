"""Upvote domain service.

Upvotes are toggled: each call flips whether the user has upvoted a
recommendation, and the recommendation author's points follow.
"""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from acadly.domain.model import Profile, Recommendation, Upvote
from acadly.domain.repository import RecommendationRepository, UpvoteRepository
from acadly.domain.value import ProfileId, RecommendationId, UpvoteId

from .base import Service
from .notification_service import NotificationService
from .profile_service import ProfileService


class UpvoteService(Service):
    """Domain service for upvote operations."""

    def __init__(
        self,
        upvote_repository: UpvoteRepository,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points_per_upvote: int,
    ) -> None:
        """Initialize upvote service.

        Args:
            upvote_repository: Upvote repository
            recommendation_repository: Recommendation repository
            profile_service: Profile domain service (points ledger)
            notification_service: Notification domain service
            points_per_upvote: Points moved to or from the author per upvote
        """
        self.upvote_repository = upvote_repository
        self.recommendation_repository = recommendation_repository
        self.profile_service = profile_service
        self.notification_service = notification_service
        self.points_per_upvote = points_per_upvote

    async def toggle(self, voter: Profile, recommendation_id: RecommendationId) -> bool:
        """Flip a user's upvote on a recommendation.

        Removing an upvote retracts a point from the author (never below
        zero). Adding one awards a point, and notifies the author unless
        they upvoted their own recommendation. An upvote on a missing
        recommendation is never created, though a leftover one is removed.

        Args:
            voter: Profile toggling the upvote
            recommendation_id: Target recommendation

        Returns:
            True if the user now upvotes the recommendation, False otherwise
        """
        with logfire.span(
            "upvote_service.toggle",
            recommendation_id=str(recommendation_id),
            user_id=str(voter.id),
        ):
            recommendation = await self.recommendation_repository.find_by_id(
                recommendation_id
            )
            existing = await self.upvote_repository.find_by_user_and_recommendation(
                voter.id, recommendation_id
            )

            if existing:
                await self._remove(voter.id, recommendation_id, recommendation)
                return False

            if not recommendation:
                logfire.warn(
                    "Upvote on non-existent recommendation",
                    recommendation_id=str(recommendation_id),
                )
                return False

            upvote = Upvote(
                id=UpvoteId(uuid4()),
                user_id=voter.id,
                recommendation_id=recommendation_id,
                created_at=datetime.now(),
            )
            try:
                await self.upvote_repository.save(upvote)
            except IntegrityError:
                # A concurrent request inserted the same pair first
                logfire.warn(
                    "Duplicate upvote, treating as toggle off",
                    user_id=str(voter.id),
                    recommendation_id=str(recommendation_id),
                )
                await self._remove(voter.id, recommendation_id, recommendation)
                return False

            await self.profile_service.award_points(
                recommendation.author_id, self.points_per_upvote
            )

            if recommendation.author_id != voter.id:
                await self.notification_service.notify(
                    recommendation.author_id,
                    "New Upvote",
                    f'{voter.full_name} upvoted your recommendation "{recommendation.title}"',
                )

            logfire.info(
                "Upvote added",
                recommendation_id=str(recommendation_id),
                user_id=str(voter.id),
            )
            return True

    async def _remove(
        self,
        user_id: ProfileId,
        recommendation_id: RecommendationId,
        recommendation: Recommendation | None,
    ) -> None:
        deleted = await self.upvote_repository.delete_by_user_and_recommendation(
            user_id, recommendation_id
        )
        if deleted and recommendation:
            await self.profile_service.retract_points(
                recommendation.author_id, self.points_per_upvote
            )
        logfire.info(
            "Upvote removed",
            recommendation_id=str(recommendation_id),
            user_id=str(user_id),
            deleted=deleted,
        )

    async def count_for_recommendation(self, recommendation_id: RecommendationId) -> int:
        return await self.upvote_repository.count_by_recommendation(recommendation_id)

    async def count_for_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> dict[RecommendationId, int]:
        """Count upvotes per recommendation, zero-filled."""
        if not recommendation_ids:
            return {}
        counts = await self.upvote_repository.count_by_recommendations(
            recommendation_ids
        )
        return {rid: counts.get(rid, 0) for rid in recommendation_ids}

    async def get_user_upvotes(
        self, user_id: ProfileId, recommendation_ids: Sequence[RecommendationId]
    ) -> dict[RecommendationId, bool]:
        """Check which recommendations a user has upvoted.

        Args:
            user_id: User ID
            recommendation_ids: Recommendation IDs to check

        Returns:
            Mapping of recommendation ID to whether the user upvoted it
        """
        if not recommendation_ids:
            return {}

        upvotes = await self.upvote_repository.find_by_user_and_recommendations(
            user_id, recommendation_ids
        )
        upvoted = {upvote.recommendation_id for upvote in upvotes}
        return {rid: rid in upvoted for rid in recommendation_ids}
