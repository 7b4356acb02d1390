"""AI insights routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.insights import (
    GetInsightsRequest,
    GetInsightsUseCase,
    InsightsResponse,
)
from acadly.interface.api.session import require_profile

router = APIRouter(prefix="/api/ai", tags=["insights"], route_class=DishkaRoute)


@router.get("/insights", response_model=InsightsResponse)
async def get_insights(
    get_insights_use_case: FromDishka[GetInsightsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> InsightsResponse:
    """Institutional insights for deans and superadmins.

    Without a configured Gemini key, or when the call fails, the response
    carries deterministic statistics under ``fallback``.

    Raises:
        NotAuthorizedError: If the caller may not view insights (403)
    """
    user = await require_profile(get_current_user_use_case, auth_token)
    return await get_insights_use_case.execute(GetInsightsRequest(user_id=user.id))
