"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from acadly.config import Settings
from acadly.domain.repository import (
    AcademicEventRepository,
    CommentRepository,
    FacultyCalendarRepository,
    FacultyEventRepository,
    NotificationRepository,
    ProfileRepository,
    QueryRepository,
    RecommendationRepository,
    UpvoteRepository,
)
from acadly.persistence.repository import (
    PostgresAcademicEventRepository,
    PostgresCommentRepository,
    PostgresFacultyCalendarRepository,
    PostgresFacultyEventRepository,
    PostgresNotificationRepository,
    PostgresProfileRepository,
    PostgresQueryRepository,
    PostgresRecommendationRepository,
    PostgresUpvoteRepository,
)
from acadly.util.di.base import ProviderBase
from acadly.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the connection pool, disposed when the container closes."""
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            pool_pre_ping=True,
            pool_size=settings.database.pool_size,
            max_overflow=settings.database.max_overflow,
        )
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        # Rows become frozen domain models right away, nothing to refresh after commit
        return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Every write of a request (content row, points change, notification)
        lands in one transaction: committed when the request finishes, rolled
        back if an exception escapes.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_recommendation_repository(
        self, session: AsyncSession
    ) -> RecommendationRepository:
        """Provide Recommendation repository."""
        return PostgresRecommendationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_upvote_repository(self, session: AsyncSession) -> UpvoteRepository:
        """Provide Upvote repository."""
        return PostgresUpvoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_query_repository(self, session: AsyncSession) -> QueryRepository:
        """Provide Query repository."""
        return PostgresQueryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_faculty_calendar_repository(
        self, session: AsyncSession
    ) -> FacultyCalendarRepository:
        """Provide FacultyCalendar repository."""
        return PostgresFacultyCalendarRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_faculty_event_repository(
        self, session: AsyncSession
    ) -> FacultyEventRepository:
        """Provide FacultyEvent repository."""
        return PostgresFacultyEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_academic_event_repository(
        self, session: AsyncSession
    ) -> AcademicEventRepository:
        """Provide AcademicEvent repository."""
        return PostgresAcademicEventRepository(session)
