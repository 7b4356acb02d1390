"""In-memory comment repository for testing."""

from collections import Counter
from typing import Dict, List, Sequence

from acadly.domain.model import Comment
from acadly.domain.repository import CommentRepository
from acadly.domain.value import RecommendationId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> List[Comment]:
        comments = [
            c
            for c in self._store.comments.values()
            if c.recommendation_id == recommendation_id
        ]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        wanted = set(recommendation_ids)
        return dict(
            Counter(
                c.recommendation_id
                for c in self._store.comments.values()
                if c.recommendation_id in wanted
            )
        )

    async def save(self, comment: Comment) -> Comment:
        self._store.comments[comment.id] = comment
        return comment
