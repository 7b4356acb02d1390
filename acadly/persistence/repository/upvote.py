"""PostgreSQL implementation of Upvote repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Upvote
from acadly.domain.repository import UpvoteRepository
from acadly.domain.value import ProfileId, RecommendationId
from acadly.persistence.mappers import model_to_dict, row_to_upvote
from acadly.persistence.tables import upvotes_table


class PostgresUpvoteRepository(UpvoteRepository):
    """PostgreSQL implementation of UpvoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> Optional[Upvote]:
        """Find a user's upvote on a recommendation."""
        stmt = select(upvotes_table).where(
            and_(
                upvotes_table.c.user_id == user_id,
                upvotes_table.c.recommendation_id == recommendation_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_upvote(row._asdict()) if row else None

    async def find_by_user_and_recommendations(
        self,
        user_id: ProfileId,
        recommendation_ids: Sequence[RecommendationId],
    ) -> List[Upvote]:
        """Find a user's upvotes on several recommendations (batch query)."""
        if not recommendation_ids:
            return []

        stmt = select(upvotes_table).where(
            and_(
                upvotes_table.c.user_id == user_id,
                upvotes_table.c.recommendation_id.in_(recommendation_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_upvote(row._asdict()) for row in result.fetchall()]

    async def save(self, upvote: Upvote) -> Upvote:
        """Save an upvote inside a savepoint.

        A unique violation rolls back only the savepoint and is re-raised.
        """
        stmt = insert(upvotes_table).values(**model_to_dict(upvote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return upvote

    async def delete_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> bool:
        """Delete a user's upvote on a recommendation."""
        stmt = delete(upvotes_table).where(
            and_(
                upvotes_table.c.user_id == user_id,
                upvotes_table.c.recommendation_id == recommendation_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_recommendation(
        self, recommendation_id: RecommendationId
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(upvotes_table)
            .where(upvotes_table.c.recommendation_id == recommendation_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_recommendations(
        self, recommendation_ids: Sequence[RecommendationId]
    ) -> Dict[RecommendationId, int]:
        """Count upvotes for several recommendations (batch query)."""
        if not recommendation_ids:
            return {}

        stmt = (
            select(upvotes_table.c.recommendation_id, func.count().label("total"))
            .where(upvotes_table.c.recommendation_id.in_(recommendation_ids))
            .group_by(upvotes_table.c.recommendation_id)
        )
        result = await self.session.execute(stmt)
        return {
            RecommendationId(row.recommendation_id): row.total for row in result.all()
        }
