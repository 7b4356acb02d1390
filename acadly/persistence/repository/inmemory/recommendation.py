"""In-memory recommendation repository for testing."""

from typing import List, Optional

from acadly.domain.model import Recommendation
from acadly.domain.repository import RecommendationRepository
from acadly.domain.value import ProfileId, RecommendationId

from .store import InMemoryStore


class InMemoryRecommendationRepository(RecommendationRepository):
    """In-memory implementation of RecommendationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(
        self, recommendation_id: RecommendationId
    ) -> Optional[Recommendation]:
        return self._store.recommendations.get(recommendation_id)

    async def find_recent(self, limit: Optional[int] = None) -> List[Recommendation]:
        recent = sorted(
            self._store.recommendations.values(),
            key=lambda r: r.created_at,
            reverse=True,
        )
        return recent if limit is None else recent[:limit]

    async def save(self, recommendation: Recommendation) -> Recommendation:
        self._store.recommendations[recommendation.id] = recommendation
        return recommendation

    async def count(self) -> int:
        return len(self._store.recommendations)

    async def count_by_author(self, author_id: ProfileId) -> int:
        return sum(
            1 for r in self._store.recommendations.values() if r.author_id == author_id
        )
