"""Create query use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from acadly.domain.model import Query
from acadly.domain.service import QueryService
from acadly.domain.value import ProfileId, QueryStatus, QueryType


class CreateQueryRequest(BaseModel):
    """Create query request.

    Status and response are not accepted from the author.
    """

    title: str
    description: str
    type: QueryType
    author_id: str  # Profile ID from authenticated user


class QueryInfo(BaseModel):
    """Query as stored."""

    id: str
    title: str
    description: str
    type: QueryType
    status: QueryStatus
    response: str | None
    author_id: str
    responder_id: str | None
    created_at: datetime

    @classmethod
    def from_query(cls, query: Query) -> "QueryInfo":
        return cls(
            id=str(query.id),
            title=query.title,
            description=query.description,
            type=query.type,
            status=query.status,
            response=query.response,
            author_id=str(query.author_id),
            responder_id=str(query.responder_id) if query.responder_id else None,
            created_at=query.created_at,
        )


class CreateQueryUseCase:
    """Use case for raising a query."""

    def __init__(self, query_service: QueryService) -> None:
        """Initialize create query use case.

        Args:
            query_service: Query domain service
        """
        self.query_service = query_service

    async def execute(self, request: CreateQueryRequest) -> QueryInfo:
        """Execute create query flow.

        Args:
            request: Query details

        Returns:
            Created query, status open
        """
        query = await self.query_service.create_query(
            author_id=ProfileId(UUID(request.author_id)),
            title=request.title,
            description=request.description,
            query_type=request.type,
        )
        return QueryInfo.from_query(query)
