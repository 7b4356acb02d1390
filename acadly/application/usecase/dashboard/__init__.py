"""Dashboard and leaderboard use cases."""

from .get_dashboard_stats import (
    ActivityItem,
    DashboardStatsResponse,
    GetDashboardStatsRequest,
    GetDashboardStatsUseCase,
    LeaderboardPreviewEntry,
)
from .get_leaderboard import GetLeaderboardUseCase, LeaderboardEntry

__all__ = [
    "ActivityItem",
    "DashboardStatsResponse",
    "GetDashboardStatsRequest",
    "GetDashboardStatsUseCase",
    "GetLeaderboardUseCase",
    "LeaderboardEntry",
    "LeaderboardPreviewEntry",
]
