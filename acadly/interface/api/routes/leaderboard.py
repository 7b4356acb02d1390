"""Leaderboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.dashboard import (
    GetLeaderboardUseCase,
    LeaderboardEntry,
)
from acadly.interface.api.session import require_profile

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"], route_class=DishkaRoute)


@router.get("", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[LeaderboardEntry]:
    """Top profiles by points."""
    await require_profile(get_current_user_use_case, auth_token)
    return await get_leaderboard_use_case.execute()
