"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from acadly.persistence.repository.inmemory import (
    InMemoryAcademicEventRepository,
    InMemoryCommentRepository,
    InMemoryFacultyCalendarRepository,
    InMemoryFacultyEventRepository,
    InMemoryNotificationRepository,
    InMemoryProfileRepository,
    InMemoryQueryRepository,
    InMemoryRecommendationRepository,
    InMemoryStore,
    InMemoryUpvoteRepository,
)
from acadly.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped, so every request served by one container sees
    the same data, the way requests share one database. Each test builds its
    own container and therefore starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_recommendation_repository(
        self, store: InMemoryStore
    ) -> RecommendationRepository:
        """Provide in-memory recommendation repository."""
        return InMemoryRecommendationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_upvote_repository(self, store: InMemoryStore) -> UpvoteRepository:
        """Provide in-memory upvote repository."""
        return InMemoryUpvoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_query_repository(self, store: InMemoryStore) -> QueryRepository:
        """Provide in-memory query repository."""
        return InMemoryQueryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_faculty_calendar_repository(
        self, store: InMemoryStore
    ) -> FacultyCalendarRepository:
        """Provide in-memory faculty calendar repository."""
        return InMemoryFacultyCalendarRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_faculty_event_repository(
        self, store: InMemoryStore
    ) -> FacultyEventRepository:
        """Provide in-memory faculty event repository."""
        return InMemoryFacultyEventRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_academic_event_repository(
        self, store: InMemoryStore
    ) -> AcademicEventRepository:
        """Provide in-memory academic event repository."""
        return InMemoryAcademicEventRepository(store)
