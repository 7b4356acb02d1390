"""Upvote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteResponse,
    ToggleUpvoteUseCase,
)
from acadly.interface.api.session import require_profile

router = APIRouter(
    prefix="/api/recommendations", tags=["upvotes"], route_class=DishkaRoute
)


@router.post("/{recommendation_id}/upvote", response_model=ToggleUpvoteResponse)
async def toggle_upvote(
    recommendation_id: UUID,
    toggle_upvote_use_case: FromDishka[ToggleUpvoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ToggleUpvoteResponse:
    """Toggle the caller's upvote on a recommendation.

    Returns:
        Whether the caller's vote is present after the call
    """
    voter = await require_profile(get_current_user_use_case, auth_token)
    return await toggle_upvote_use_case.execute(
        ToggleUpvoteRequest(
            recommendation_id=str(recommendation_id), user_id=voter.id
        )
    )
