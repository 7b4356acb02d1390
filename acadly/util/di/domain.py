"""Domain layer DI providers."""

from dishka import Scope, provide

from acadly.adapter.gemini import GeminiInsightsClient
from acadly.config import AuthSettings, PointsSettings
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
from acadly.domain.service import (
    AcademicEventService,
    AccessPolicy,
    AuthService,
    CalendarService,
    CommentService,
    InsightsService,
    JWTService,
    NotificationService,
    PasswordService,
    ProfileService,
    QueryService,
    RecommendationService,
    UpvoteService,
)
from acadly.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService()

    @provide(scope=Scope.APP)
    def get_access_policy(self) -> AccessPolicy:
        """Provide role capability policy."""
        return AccessPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service (points ledger)."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_auth_service(
        self,
        profile_service: ProfileService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            profile_service=profile_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_recommendation_service(
        self,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        points: PointsSettings,
    ) -> RecommendationService:
        """Provide recommendation domain service."""
        return RecommendationService(
            recommendation_repository=recommendation_repository,
            profile_service=profile_service,
            points_awarded=points.recommendation_created,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points: PointsSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            recommendation_repository=recommendation_repository,
            profile_service=profile_service,
            notification_service=notification_service,
            points_awarded=points.comment_created,
        )

    @provide
    def get_upvote_service(
        self,
        upvote_repository: UpvoteRepository,
        recommendation_repository: RecommendationRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points: PointsSettings,
    ) -> UpvoteService:
        """Provide upvote domain service."""
        return UpvoteService(
            upvote_repository=upvote_repository,
            recommendation_repository=recommendation_repository,
            profile_service=profile_service,
            notification_service=notification_service,
            points_per_upvote=points.upvote_received,
        )

    @provide
    def get_query_service(
        self,
        query_repository: QueryRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points: PointsSettings,
    ) -> QueryService:
        """Provide query domain service."""
        return QueryService(
            query_repository=query_repository,
            profile_service=profile_service,
            notification_service=notification_service,
            points_awarded=points.query_created,
        )

    @provide
    def get_calendar_service(
        self,
        calendar_repository: FacultyCalendarRepository,
        event_repository: FacultyEventRepository,
    ) -> CalendarService:
        """Provide faculty calendar domain service."""
        return CalendarService(
            calendar_repository=calendar_repository,
            event_repository=event_repository,
        )

    @provide
    def get_academic_event_service(
        self,
        academic_event_repository: AcademicEventRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
    ) -> AcademicEventService:
        """Provide academic calendar domain service."""
        return AcademicEventService(
            academic_event_repository=academic_event_repository,
            profile_service=profile_service,
            notification_service=notification_service,
        )

    @provide
    def get_insights_service(
        self,
        gemini_client: GeminiInsightsClient,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        query_service: QueryService,
    ) -> InsightsService:
        """Provide AI insights domain service."""
        return InsightsService(
            generator=gemini_client,
            profile_service=profile_service,
            recommendation_service=recommendation_service,
            query_service=query_service,
        )
