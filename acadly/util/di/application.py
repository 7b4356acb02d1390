"""Application layer DI providers."""

from dishka import Scope, provide

from acadly.application.usecase.academic_event import (
    CreateAcademicEventUseCase,
    DeleteAcademicEventUseCase,
    ListAcademicEventsUseCase,
)
from acadly.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from acadly.application.usecase.calendar import (
    CreateFacultyEventUseCase,
    DeleteCalendarUseCase,
    DeleteFacultyEventUseCase,
    GetFacultyCalendarUseCase,
    UploadCalendarUseCase,
)
from acadly.application.usecase.comment import CreateCommentUseCase
from acadly.application.usecase.dashboard import (
    GetDashboardStatsUseCase,
    GetLeaderboardUseCase,
)
from acadly.application.usecase.insights import GetInsightsUseCase
from acadly.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from acadly.application.usecase.query import (
    CreateQueryUseCase,
    ListQueriesUseCase,
    RespondToQueryUseCase,
)
from acadly.application.usecase.recommendation import (
    CreateRecommendationUseCase,
    GetRecommendationUseCase,
    ListRecommendationsUseCase,
)
from acadly.application.usecase.upvote import ToggleUpvoteUseCase
from acadly.domain.service import (
    AcademicEventService,
    AccessPolicy,
    AuthService,
    CalendarService,
    CommentService,
    InsightsService,
    NotificationService,
    ProfileService,
    QueryService,
    RecommendationService,
    UpvoteService,
)
from acadly.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    # Recommendation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_recommendation_use_case(
        self, recommendation_service: RecommendationService
    ) -> CreateRecommendationUseCase:
        """Provide create recommendation use case."""
        return CreateRecommendationUseCase(
            recommendation_service=recommendation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_recommendations_use_case(
        self,
        recommendation_service: RecommendationService,
        comment_service: CommentService,
        upvote_service: UpvoteService,
        profile_service: ProfileService,
    ) -> ListRecommendationsUseCase:
        """Provide list recommendations use case."""
        return ListRecommendationsUseCase(
            recommendation_service=recommendation_service,
            comment_service=comment_service,
            upvote_service=upvote_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_recommendation_use_case(
        self,
        recommendation_service: RecommendationService,
        comment_service: CommentService,
        upvote_service: UpvoteService,
        profile_service: ProfileService,
    ) -> GetRecommendationUseCase:
        """Provide get recommendation use case."""
        return GetRecommendationUseCase(
            recommendation_service=recommendation_service,
            comment_service=comment_service,
            upvote_service=upvote_service,
            profile_service=profile_service,
        )

    # Comment and upvote use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_upvote_use_case(
        self, upvote_service: UpvoteService, profile_service: ProfileService
    ) -> ToggleUpvoteUseCase:
        """Provide toggle upvote use case."""
        return ToggleUpvoteUseCase(
            upvote_service=upvote_service, profile_service=profile_service
        )

    # Query use cases
    @provide(scope=Scope.REQUEST)
    def get_create_query_use_case(
        self, query_service: QueryService
    ) -> CreateQueryUseCase:
        """Provide create query use case."""
        return CreateQueryUseCase(query_service=query_service)

    @provide(scope=Scope.REQUEST)
    def get_list_queries_use_case(
        self, query_service: QueryService, profile_service: ProfileService
    ) -> ListQueriesUseCase:
        """Provide list queries use case."""
        return ListQueriesUseCase(
            query_service=query_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_respond_to_query_use_case(
        self,
        query_service: QueryService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> RespondToQueryUseCase:
        """Provide respond to query use case."""
        return RespondToQueryUseCase(
            query_service=query_service,
            profile_service=profile_service,
            access_policy=access_policy,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    # Faculty calendar use cases
    @provide(scope=Scope.REQUEST)
    def get_faculty_calendar_use_case(
        self, calendar_service: CalendarService
    ) -> GetFacultyCalendarUseCase:
        """Provide get faculty calendar use case."""
        return GetFacultyCalendarUseCase(calendar_service=calendar_service)

    @provide(scope=Scope.REQUEST)
    def get_upload_calendar_use_case(
        self, calendar_service: CalendarService
    ) -> UploadCalendarUseCase:
        """Provide upload calendar use case."""
        return UploadCalendarUseCase(calendar_service=calendar_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_calendar_use_case(
        self, calendar_service: CalendarService
    ) -> DeleteCalendarUseCase:
        """Provide delete calendar use case."""
        return DeleteCalendarUseCase(calendar_service=calendar_service)

    @provide(scope=Scope.REQUEST)
    def get_create_faculty_event_use_case(
        self, calendar_service: CalendarService
    ) -> CreateFacultyEventUseCase:
        """Provide create faculty event use case."""
        return CreateFacultyEventUseCase(calendar_service=calendar_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_faculty_event_use_case(
        self, calendar_service: CalendarService
    ) -> DeleteFacultyEventUseCase:
        """Provide delete faculty event use case."""
        return DeleteFacultyEventUseCase(calendar_service=calendar_service)

    # Academic calendar use cases
    @provide(scope=Scope.REQUEST)
    def get_list_academic_events_use_case(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
    ) -> ListAcademicEventsUseCase:
        """Provide list academic events use case."""
        return ListAcademicEventsUseCase(
            academic_event_service=academic_event_service,
            profile_service=profile_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_academic_event_use_case(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> CreateAcademicEventUseCase:
        """Provide create academic event use case."""
        return CreateAcademicEventUseCase(
            academic_event_service=academic_event_service,
            profile_service=profile_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_academic_event_use_case(
        self,
        academic_event_service: AcademicEventService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> DeleteAcademicEventUseCase:
        """Provide delete academic event use case."""
        return DeleteAcademicEventUseCase(
            academic_event_service=academic_event_service,
            profile_service=profile_service,
            access_policy=access_policy,
        )

    # Dashboard and insights use cases
    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, profile_service: ProfileService
    ) -> GetLeaderboardUseCase:
        """Provide leaderboard use case."""
        return GetLeaderboardUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_dashboard_stats_use_case(
        self,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        query_service: QueryService,
        calendar_service: CalendarService,
    ) -> GetDashboardStatsUseCase:
        """Provide dashboard stats use case."""
        return GetDashboardStatsUseCase(
            profile_service=profile_service,
            recommendation_service=recommendation_service,
            query_service=query_service,
            calendar_service=calendar_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_insights_use_case(
        self,
        insights_service: InsightsService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> GetInsightsUseCase:
        """Provide AI insights use case."""
        return GetInsightsUseCase(
            insights_service=insights_service,
            profile_service=profile_service,
            access_policy=access_policy,
        )
