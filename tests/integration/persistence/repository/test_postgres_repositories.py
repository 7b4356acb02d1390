"""Integration tests for the PostgreSQL repositories.

These run against the database named by DATABASE__URL. The schema is
created from ``acadly.persistence.tables`` and every table is emptied
before each test. Without a reachable server the tests are skipped.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer
import pytest
import pytest_asyncio
from sqlalchemy import func, select, text
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from acadly.domain.model import Upvote
from acadly.domain.repository import (
    NotificationRepository,
    ProfileRepository,
    RecommendationRepository,
    UpvoteRepository,
)
from acadly.domain.service import NotificationService, ProfileService, UpvoteService
from acadly.domain.value import ProfileId, RecommendationId, UpvoteId
from acadly.persistence.repository import (
    PostgresNotificationRepository,
    PostgresUpvoteRepository,
)
from acadly.persistence.tables import (
    metadata,
    notifications_table,
    profiles_table,
    upvotes_table,
)
from tests.conftest import make_profile, make_recommendation
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked Gemini
integration_env = create_env_fixture(unmock={"persistence"})


def _create_schema(sync_conn) -> None:
    # Enum types are declared with create_type=False, so create them first
    enums = {
        column.type.name: column.type
        for table in metadata.sorted_tables
        for column in table.columns
        if isinstance(column.type, postgresql.ENUM)
    }
    for enum in enums.values():
        enum.create(sync_conn, checkfirst=True)
    metadata.create_all(sync_conn, checkfirst=True)


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Create the schema if needed and empty every table."""
    engine = await integration_env.get(AsyncEngine)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(_create_schema)
            # Every other table references profiles
            await conn.execute(text("TRUNCATE TABLE profiles CASCADE"))
    except (OSError, DBAPIError) as e:
        pytest.skip(f"PostgreSQL is not reachable: {e}")

    yield


async def _committed_points(engine: AsyncEngine, profile_id: ProfileId) -> int:
    """Read points through a separate connection, so only committed data counts."""
    async with engine.connect() as conn:
        result = await conn.execute(
            select(profiles_table.c.points).where(profiles_table.c.id == profile_id)
        )
        return result.scalar_one()


def _upvote(user_id: ProfileId, recommendation_id: RecommendationId) -> Upvote:
    return Upvote(
        id=UpvoteId(uuid4()),
        user_id=user_id,
        recommendation_id=recommendation_id,
        created_at=datetime.now(),
    )


class TestProfilePointsIntegration:
    """Relative point updates in SQL."""

    @pytest.mark.asyncio
    async def test_subtract_points_is_floored_at_zero(
        self, integration_env: AsyncContainer
    ):
        """Retracting more than a profile has leaves it at zero, not negative."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)
        profile = await profile_repo.save(make_profile(points=2))

        # Act
        await profile_repo.subtract_points(profile.id, 5)
        await session.commit()

        # Assert
        assert await _committed_points(engine, profile.id) == 0

    @pytest.mark.asyncio
    async def test_add_then_subtract_is_relative(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)
        profile = await profile_repo.save(make_profile(points=4))

        # Act
        await profile_repo.add_points(profile.id, 5)
        await profile_repo.subtract_points(profile.id, 1)
        await session.commit()

        # Assert
        assert await _committed_points(engine, profile.id) == 8


class TestUpvoteRepositoryIntegration:
    """The unique (user_id, recommendation_id) constraint and its savepoint."""

    @pytest.mark.asyncio
    async def test_duplicate_insert_leaves_session_usable(
        self, integration_env: AsyncContainer
    ):
        """After a unique violation the same session can keep writing and commit."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        rec_repo = await integration_env.get(RecommendationRepository)
        upvote_repo = await integration_env.get(UpvoteRepository)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)

        author = await profile_repo.save(make_profile("Dr. Author", points=3))
        voter = await profile_repo.save(make_profile("Dr. Voter"))
        recommendation = await rec_repo.save(make_recommendation(author.id))
        await upvote_repo.save(_upvote(voter.id, recommendation.id))

        # Act
        with pytest.raises(IntegrityError):
            await upvote_repo.save(_upvote(voter.id, recommendation.id))
        await profile_repo.add_points(author.id, 1)
        await session.commit()

        # Assert
        assert await _committed_points(engine, author.id) == 4
        async with engine.connect() as conn:
            votes = await conn.execute(
                select(func.count())
                .select_from(upvotes_table)
                .where(upvotes_table.c.recommendation_id == recommendation.id)
            )
            assert votes.scalar_one() == 1

    @pytest.mark.asyncio
    async def test_racing_toggle_takes_the_delete_path(
        self, integration_env: AsyncContainer
    ):
        """A toggle whose insert collides removes the vote and retracts the point."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        rec_repo = await integration_env.get(RecommendationRepository)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)

        author = await profile_repo.save(make_profile("Dr. Author", points=6))
        voter = await profile_repo.save(make_profile("Dr. Voter"))
        recommendation = await rec_repo.save(make_recommendation(author.id))
        # Written by the concurrent request
        await PostgresUpvoteRepository(session).save(
            _upvote(voter.id, recommendation.id)
        )

        upvote_service = UpvoteService(
            upvote_repository=StaleLookupUpvoteRepository(session),
            recommendation_repository=rec_repo,
            profile_service=ProfileService(profile_repository=profile_repo),
            notification_service=NotificationService(
                notification_repository=PostgresNotificationRepository(session)
            ),
            points_per_upvote=1,
        )

        # Act
        upvoted = await upvote_service.toggle(voter, recommendation.id)
        await session.commit()

        # Assert
        assert upvoted is False
        assert await _committed_points(engine, author.id) == 5
        async with engine.connect() as conn:
            votes = await conn.execute(select(func.count()).select_from(upvotes_table))
            assert votes.scalar_one() == 0


class StaleLookupUpvoteRepository(PostgresUpvoteRepository):
    """Misses the existing vote on the first lookup, as a concurrent request would."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.lookups = 0

    async def find_by_user_and_recommendation(
        self, user_id: ProfileId, recommendation_id: RecommendationId
    ) -> Optional[Upvote]:
        self.lookups += 1
        if self.lookups == 1:
            return None
        return await super().find_by_user_and_recommendation(
            user_id, recommendation_id
        )


class TestNotificationRepositoryIntegration:
    """Failed notification inserts must not undo the write that triggered them."""

    @pytest.mark.asyncio
    async def test_failed_notify_keeps_surrounding_write(
        self, integration_env: AsyncContainer
    ):
        """A notification for an unknown profile fails its FK and is dropped."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        notification_service = await integration_env.get(NotificationService)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)
        profile = await profile_repo.save(make_profile(points=0))

        # Act
        await profile_repo.add_points(profile.id, 3)
        await notification_service.notify(
            ProfileId(uuid4()), "New Comment", "Nobody will read this."
        )
        await session.commit()

        # Assert
        assert await _committed_points(engine, profile.id) == 3
        async with engine.connect() as conn:
            count = await conn.execute(
                select(func.count()).select_from(notifications_table)
            )
            assert count.scalar_one() == 0

    @pytest.mark.asyncio
    async def test_batch_insert_notifies_every_recipient(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        notification_service = await integration_env.get(NotificationService)
        first = await profile_repo.save(make_profile("Dr. First"))
        second = await profile_repo.save(make_profile("Dr. Second"))

        # Act
        inserted = await notification_service.notify_many(
            [first.id, second.id], "New Academic Event", "Mid-term exams"
        )

        # Assert
        assert inserted == 2
        assert await notification_repo.count_unread(first.id) == 1
        assert await notification_repo.count_unread(second.id) == 1

    @pytest.mark.asyncio
    async def test_failed_batch_keeps_surrounding_write(
        self, integration_env: AsyncContainer
    ):
        """One unknown recipient fails the whole batch and nothing else."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        notification_service = await integration_env.get(NotificationService)
        session = await integration_env.get(AsyncSession)
        engine = await integration_env.get(AsyncEngine)
        creator = await profile_repo.save(make_profile("Dr. Creator", points=1))
        recipient = await profile_repo.save(make_profile("Dr. Recipient"))

        # Act
        inserted = await notification_service.notify_many(
            [recipient.id, ProfileId(uuid4())], "New Academic Event", "Mid-term exams"
        )
        await profile_repo.add_points(creator.id, 1)
        await session.commit()

        # Assert
        assert inserted == 0
        assert await notification_repo.count_unread(recipient.id) == 0
        assert await _committed_points(engine, creator.id) == 2
