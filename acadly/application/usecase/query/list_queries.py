"""List queries use case."""

from datetime import datetime

from pydantic import BaseModel

from acadly.domain.service import ProfileService, QueryService
from acadly.domain.value import QueryStatus, QueryType


class QueryListItem(BaseModel):
    """Query with its author's name."""

    id: str
    title: str
    description: str
    type: QueryType
    status: QueryStatus
    response: str | None
    author_id: str
    author_name: str | None
    responder_id: str | None
    created_at: datetime


class ListQueriesUseCase:
    """Use case for listing all queries, newest first."""

    def __init__(
        self, query_service: QueryService, profile_service: ProfileService
    ) -> None:
        self.query_service = query_service
        self.profile_service = profile_service

    async def execute(self) -> list[QueryListItem]:
        queries = await self.query_service.list_recent()
        names = await self.profile_service.get_names([q.author_id for q in queries])
        return [
            QueryListItem(
                id=str(q.id),
                title=q.title,
                description=q.description,
                type=q.type,
                status=q.status,
                response=q.response,
                author_id=str(q.author_id),
                author_name=names.get(q.author_id),
                responder_id=str(q.responder_id) if q.responder_id else None,
                created_at=q.created_at,
            )
            for q in queries
        ]
