"""PostgreSQL implementation of Query repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Query
from acadly.domain.repository import QueryRepository
from acadly.domain.value import ProfileId, QueryId, QueryStatus
from acadly.persistence.mappers import model_to_dict, row_to_query
from acadly.persistence.tables import queries_table


class PostgresQueryRepository(QueryRepository):
    """PostgreSQL implementation of QueryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, query_id: QueryId) -> Optional[Query]:
        """Find a query by ID."""
        stmt = select(queries_table).where(queries_table.c.id == query_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_query(row._asdict()) if row else None

    async def find_recent(self, limit: Optional[int] = None) -> List[Query]:
        """Find queries, newest first."""
        stmt = select(queries_table).order_by(queries_table.c.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_query(row._asdict()) for row in result.fetchall()]

    async def save(self, query: Query) -> Query:
        """Save a new query."""
        stmt = insert(queries_table).values(**model_to_dict(query))
        await self.session.execute(stmt)
        await self.session.flush()
        return query

    async def update_response(
        self,
        query_id: QueryId,
        status: QueryStatus,
        response: str,
        responder_id: ProfileId,
    ) -> Optional[Query]:
        """Record a responder's answer on a query."""
        stmt = (
            update(queries_table)
            .where(queries_table.c.id == query_id)
            .values(status=status.value, response=response, responder_id=responder_id)
            .returning(*queries_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_query(row._asdict()) if row else None

    async def count(self) -> int:
        stmt = select(func.count()).select_from(queries_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_author(self, author_id: ProfileId) -> int:
        stmt = (
            select(func.count())
            .select_from(queries_table)
            .where(queries_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_status(self, status: QueryStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(queries_table)
            .where(queries_table.c.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
