"""In-memory upvote repository for testing."""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from acadly.domain.model import Upvote
from acadly.domain.repository import UpvoteRepository
from acadly.domain.value import ProfileId, RecommendationId

from .store import InMemoryStore


class InMemoryUpvoteRepository(UpvoteRepository):
    """In-memory implementation of UpvoteRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> Optional[Upvote]:
        for upvote in self._store.upvotes.values():
            if (
                upvote.user_id == user_id
                and upvote.recommendation_id == recommendation_id
            ):
                return upvote
        return None

    async def find_by_user_and_recommendations(
        self,
        user_id: ProfileId,
        recommendation_ids: Sequence[RecommendationId],
    ) -> List[Upvote]:
        wanted = set(recommendation_ids)
        return [
            u
            for u in self._store.upvotes.values()
            if u.user_id == user_id and u.recommendation_id in wanted
        ]

    async def save(self, upvote: Upvote) -> Upvote:
        """Save an upvote.

        Raises:
            IntegrityError: If the user already upvoted the recommendation
        """
        existing = await self.find_by_user_and_recommendation(
            upvote.user_id, upvote.recommendation_id
        )
        if existing:
            raise IntegrityError("Duplicate upvote", None, Exception())

        self._store.upvotes[upvote.id] = upvote
        return upvote

    async def delete_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> bool:
        existing = await self.find_by_user_and_recommendation(
            user_id, recommendation_id
        )
        if not existing:
            return False
        del self._store.upvotes[existing.id]
        return True

    async def count_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> int:
        return sum(
            1
            for u in self._store.upvotes.values()
            if u.recommendation_id == recommendation_id
        )

    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        wanted = set(recommendation_ids)
        return dict(
            Counter(
                u.recommendation_id
                for u in self._store.upvotes.values()
                if u.recommendation_id in wanted
            )
        )
