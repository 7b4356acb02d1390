"""Dashboard stats use case."""

from datetime import date, datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from acadly.application.usecase.calendar import FacultyEventInfo
from acadly.domain.service import (
    CalendarService,
    ProfileService,
    QueryService,
    RecommendationService,
)
from acadly.domain.value import ActivityType, ProfileId

FEED_SIZE = 5
LEADERBOARD_PREVIEW_SIZE = 5
UPCOMING_EVENTS_SIZE = 5


class ActivityItem(BaseModel):
    """Entry in the recent activity feed."""

    id: str
    title: str
    type: ActivityType
    created_at: datetime
    author_name: str | None


class LeaderboardPreviewEntry(BaseModel):
    """Compact leaderboard entry."""

    id: str
    full_name: str
    points: int


class GetDashboardStatsRequest(BaseModel):
    """Dashboard request."""

    user_id: str  # Profile ID from authenticated user
    today: date | None = None


class DashboardStatsResponse(BaseModel):
    """Personal dashboard."""

    points: int
    recommendation_count: int
    query_count: int
    recent_activity: list[ActivityItem]
    leaderboard: list[LeaderboardPreviewEntry]
    upcoming_events: list[FacultyEventInfo]


class GetDashboardStatsUseCase:
    """Use case for assembling the caller's dashboard.

    Everything is recomputed on each request.
    """

    def __init__(
        self,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        query_service: QueryService,
        calendar_service: CalendarService,
    ) -> None:
        """Initialize dashboard use case.

        Args:
            profile_service: Profile domain service
            recommendation_service: Recommendation domain service
            query_service: Query domain service
            calendar_service: Faculty calendar domain service
        """
        self.profile_service = profile_service
        self.recommendation_service = recommendation_service
        self.query_service = query_service
        self.calendar_service = calendar_service

    async def execute(self, request: GetDashboardStatsRequest) -> DashboardStatsResponse:
        """Execute dashboard flow.

        The activity feed merges the latest recommendations and queries by
        creation time and keeps the newest few.

        Args:
            request: Dashboard request

        Returns:
            Dashboard stats
        """
        with logfire.span("get_dashboard_stats.execute", user_id=request.user_id):
            user_id = ProfileId(UUID(request.user_id))
            profile = await self.profile_service.get_by_id(user_id)

            recommendation_count = await self.recommendation_service.count_by_author(
                user_id
            )
            query_count = await self.query_service.count_by_author(user_id)

            recent_recommendations = await self.recommendation_service.list_recent(
                FEED_SIZE
            )
            recent_queries = await self.query_service.list_recent(FEED_SIZE)
            names = await self.profile_service.get_names(
                [r.author_id for r in recent_recommendations]
                + [q.author_id for q in recent_queries]
            )

            feed = [
                ActivityItem(
                    id=str(r.id),
                    title=r.title,
                    type=ActivityType.RECOMMENDATION,
                    created_at=r.created_at,
                    author_name=names.get(r.author_id),
                )
                for r in recent_recommendations
            ] + [
                ActivityItem(
                    id=str(q.id),
                    title=q.title,
                    type=ActivityType.QUERY,
                    created_at=q.created_at,
                    author_name=names.get(q.author_id),
                )
                for q in recent_queries
            ]
            feed.sort(key=lambda item: item.created_at, reverse=True)

            top = await self.profile_service.get_leaderboard(LEADERBOARD_PREVIEW_SIZE)
            upcoming = await self.calendar_service.get_upcoming_events(
                user_id, UPCOMING_EVENTS_SIZE, today=request.today
            )

            return DashboardStatsResponse(
                points=profile.points,
                recommendation_count=recommendation_count,
                query_count=query_count,
                recent_activity=feed[:FEED_SIZE],
                leaderboard=[
                    LeaderboardPreviewEntry(
                        id=str(p.id), full_name=p.full_name, points=p.points
                    )
                    for p in top
                ],
                upcoming_events=[FacultyEventInfo.from_event(e) for e in upcoming],
            )
