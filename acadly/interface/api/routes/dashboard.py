"""Dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.dashboard import (
    DashboardStatsResponse,
    GetDashboardStatsRequest,
    GetDashboardStatsUseCase,
)
from acadly.interface.api.session import require_profile

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], route_class=DishkaRoute)


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    get_dashboard_stats_use_case: FromDishka[GetDashboardStatsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DashboardStatsResponse:
    """Personal counters, recent activity, leaderboard preview and upcoming events.

    Args:
        get_dashboard_stats_use_case: Dashboard stats use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Dashboard aggregate for the caller
    """
    user = await require_profile(get_current_user_use_case, auth_token)
    return await get_dashboard_stats_use_case.execute(
        GetDashboardStatsRequest(user_id=user.id)
    )
