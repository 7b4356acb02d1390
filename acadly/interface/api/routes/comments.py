"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from acadly.interface.api.session import require_profile

router = APIRouter(
    prefix="/api/recommendations", tags=["comments"], route_class=DishkaRoute
)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a recommendation."""

    content: str = Field(min_length=1, max_length=2000)


@router.post(
    "/{recommendation_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    recommendation_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a recommendation.

    The commenter earns points and the recommendation author is notified
    unless they commented on their own recommendation.

    Args:
        recommendation_id: Recommendation UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        NotFoundError: If the recommendation does not exist (404)
    """
    author = await require_profile(get_current_user_use_case, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            recommendation_id=str(recommendation_id),
            content=request.content,
            author_id=author.id,
        )
    )
