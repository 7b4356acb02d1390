"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from acadly.domain.model import Profile
from acadly.domain.repository import ProfileRepository
from acadly.domain.value import ProfileId
from acadly.persistence.mappers import model_to_dict, row_to_profile
from acadly.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by email."""
        stmt = select(profiles_table).where(profiles_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> List[Profile]:
        """Find several profiles at once (batch query)."""
        if not profile_ids:
            return []

        stmt = select(profiles_table).where(profiles_table.c.id.in_(profile_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_top_by_points(self, limit: int) -> List[Profile]:
        """Find the highest-scoring profiles."""
        stmt = (
            select(profiles_table)
            .order_by(profiles_table.c.points.desc(), profiles_table.c.created_at)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_all_ids(self) -> List[ProfileId]:
        """Return the IDs of every profile."""
        result = await self.session.execute(select(profiles_table.c.id))
        return [ProfileId(row.id) for row in result.all()]

    async def count(self) -> int:
        """Count all profiles."""
        stmt = select(func.count()).select_from(profiles_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, profile: Profile) -> Profile:
        """Save a new profile."""
        stmt = insert(profiles_table).values(**model_to_dict(profile))
        await self.session.execute(stmt)
        await self.session.flush()
        return profile

    async def add_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically add points to a profile.

        Args:
            profile_id: Profile ID to update
            amount: Points to add
        """
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .values(points=profiles_table.c.points + amount)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def subtract_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically subtract points from a profile (minimum 0).

        Args:
            profile_id: Profile ID to update
            amount: Points to subtract
        """
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .values(points=func.greatest(profiles_table.c.points - amount, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()
