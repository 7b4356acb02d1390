"""Recommendation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.recommendation import (
    CreateRecommendationRequest,
    CreateRecommendationUseCase,
    GetRecommendationRequest,
    GetRecommendationResponse,
    GetRecommendationUseCase,
    ListRecommendationsRequest,
    ListRecommendationsUseCase,
    RecommendationInfo,
    RecommendationListItem,
)
from acadly.domain.value import RecommendationCategory
from acadly.interface.api.session import require_profile

router = APIRouter(
    prefix="/api/recommendations", tags=["recommendations"], route_class=DishkaRoute
)


class CreateRecommendationAPIRequest(BaseModel):
    """API request for creating a recommendation."""

    title: str = Field(min_length=3, max_length=200)
    category: RecommendationCategory
    description: str = Field(min_length=10, max_length=5000)
    rating: int = Field(default=5, ge=1, le=5)
    location: str | None = Field(default=None, max_length=200)


@router.get("", response_model=list[RecommendationListItem])
async def list_recommendations(
    list_recommendations_use_case: FromDishka[ListRecommendationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[RecommendationListItem]:
    """List recommendations, newest first, with counts and the viewer's vote."""
    viewer = await require_profile(get_current_user_use_case, auth_token)
    return await list_recommendations_use_case.execute(
        ListRecommendationsRequest(viewer_id=viewer.id)
    )


@router.post(
    "", response_model=RecommendationInfo, status_code=status.HTTP_201_CREATED
)
async def create_recommendation(
    request: CreateRecommendationAPIRequest,
    create_recommendation_use_case: FromDishka[CreateRecommendationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RecommendationInfo:
    """Create a recommendation and award the author points.

    Args:
        request: Recommendation data
        create_recommendation_use_case: Create recommendation use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created recommendation
    """
    author = await require_profile(get_current_user_use_case, auth_token)
    return await create_recommendation_use_case.execute(
        CreateRecommendationRequest(
            title=request.title,
            category=request.category,
            description=request.description,
            rating=request.rating,
            location=request.location,
            author_id=author.id,
        )
    )


@router.get("/{recommendation_id}", response_model=GetRecommendationResponse)
async def get_recommendation(
    recommendation_id: UUID,
    get_recommendation_use_case: FromDishka[GetRecommendationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetRecommendationResponse:
    """Get a recommendation with its comments and upvote state.

    Raises:
        NotFoundError: If the recommendation does not exist (404)
    """
    viewer = await require_profile(get_current_user_use_case, auth_token)
    return await get_recommendation_use_case.execute(
        GetRecommendationRequest(
            recommendation_id=str(recommendation_id), viewer_id=viewer.id
        )
    )
