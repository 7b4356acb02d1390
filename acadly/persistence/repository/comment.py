"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Comment
from acadly.domain.repository import CommentRepository
from acadly.domain.value import RecommendationId
from acadly.persistence.mappers import model_to_dict, row_to_comment
from acadly.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> List[Comment]:
        """Find all comments on a recommendation, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.recommendation_id == recommendation_id)
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        """Count comments for several recommendations (batch query)."""
        if not recommendation_ids:
            return {}

        stmt = (
            select(comments_table.c.recommendation_id, func.count().label("total"))
            .where(comments_table.c.recommendation_id.in_(recommendation_ids))
            .group_by(comments_table.c.recommendation_id)
        )
        result = await self.session.execute(stmt)
        return {
            RecommendationId(row.recommendation_id): row.total for row in result.all()
        }

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**model_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
