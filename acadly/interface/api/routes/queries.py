"""Query routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from acadly.application.usecase.auth import GetCurrentUserUseCase
from acadly.application.usecase.query import (
    CreateQueryRequest,
    CreateQueryUseCase,
    ListQueriesUseCase,
    QueryInfo,
    QueryListItem,
    RespondToQueryRequest,
    RespondToQueryUseCase,
)
from acadly.domain.value import QueryStatus, QueryType
from acadly.interface.api.session import require_profile

router = APIRouter(prefix="/api/queries", tags=["queries"], route_class=DishkaRoute)


class CreateQueryAPIRequest(BaseModel):
    """API request for raising a query."""

    title: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=10, max_length=5000)
    type: QueryType


class RespondToQueryAPIRequest(BaseModel):
    """API request for responding to a query."""

    response: str = Field(min_length=1, max_length=5000)
    status: QueryStatus


@router.get("", response_model=list[QueryListItem])
async def list_queries(
    list_queries_use_case: FromDishka[ListQueriesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[QueryListItem]:
    """List queries, newest first."""
    await require_profile(get_current_user_use_case, auth_token)
    return await list_queries_use_case.execute()


@router.post("", response_model=QueryInfo, status_code=status.HTTP_201_CREATED)
async def create_query(
    request: CreateQueryAPIRequest,
    create_query_use_case: FromDishka[CreateQueryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QueryInfo:
    """Raise a query and award the author points.

    Args:
        request: Query data
        create_query_use_case: Create query use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created query with status open
    """
    author = await require_profile(get_current_user_use_case, auth_token)
    return await create_query_use_case.execute(
        CreateQueryRequest(
            title=request.title,
            description=request.description,
            type=request.type,
            author_id=author.id,
        )
    )


@router.patch("/{query_id}/respond", response_model=QueryInfo)
async def respond_to_query(
    query_id: UUID,
    request: RespondToQueryAPIRequest,
    respond_to_query_use_case: FromDishka[RespondToQueryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QueryInfo:
    """Respond to a query and set its status.

    Only HODs, deans and superadmins may respond.

    Raises:
        NotAuthorizedError: If the caller's role may not respond (403)
        NotFoundError: If the query does not exist (404)
    """
    responder = await require_profile(get_current_user_use_case, auth_token)
    return await respond_to_query_use_case.execute(
        RespondToQueryRequest(
            query_id=str(query_id),
            response=request.response,
            status=request.status,
            responder_id=responder.id,
        )
    )
