"""PostgreSQL implementation of Recommendation repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Recommendation
from acadly.domain.repository import RecommendationRepository
from acadly.domain.value import ProfileId, RecommendationId
from acadly.persistence.mappers import model_to_dict, row_to_recommendation
from acadly.persistence.tables import recommendations_table


class PostgresRecommendationRepository(RecommendationRepository):
    """PostgreSQL implementation of RecommendationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, recommendation_id: RecommendationId
    ) -> Optional[Recommendation]:
        """Find a recommendation by ID."""
        stmt = select(recommendations_table).where(
            recommendations_table.c.id == recommendation_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_recommendation(row._asdict()) if row else None

    async def find_recent(self, limit: Optional[int] = None) -> List[Recommendation]:
        """Find recommendations, newest first."""
        stmt = select(recommendations_table).order_by(
            recommendations_table.c.created_at.desc()
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_recommendation(row._asdict()) for row in result.fetchall()]

    async def save(self, recommendation: Recommendation) -> Recommendation:
        """Save a new recommendation."""
        stmt = insert(recommendations_table).values(**model_to_dict(recommendation))
        await self.session.execute(stmt)
        await self.session.flush()
        return recommendation

    async def count(self) -> int:
        stmt = select(func.count()).select_from(recommendations_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_author(self, author_id: ProfileId) -> int:
        stmt = (
            select(func.count())
            .select_from(recommendations_table)
            .where(recommendations_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
