"""In-memory query repository for testing."""

from typing import List, Optional

from acadly.domain.model import Query
from acadly.domain.repository import QueryRepository
from acadly.domain.value import ProfileId, QueryId, QueryStatus

from .store import InMemoryStore


class InMemoryQueryRepository(QueryRepository):
    """In-memory implementation of QueryRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, query_id: QueryId) -> Optional[Query]:
        return self._store.queries.get(query_id)

    async def find_recent(self, limit: Optional[int] = None) -> List[Query]:
        recent = sorted(
            self._store.queries.values(), key=lambda q: q.created_at, reverse=True
        )
        return recent if limit is None else recent[:limit]

    async def save(self, query: Query) -> Query:
        self._store.queries[query.id] = query
        return query

    async def update_response(
        self,
        query_id: QueryId,
        status: QueryStatus,
        response: str,
        responder_id: ProfileId,
    ) -> Optional[Query]:
        query = self._store.queries.get(query_id)
        if not query:
            return None
        updated = query.model_copy(
            update={
                "status": status,
                "response": response,
                "responder_id": responder_id,
            }
        )
        self._store.queries[query_id] = updated
        return updated

    async def count(self) -> int:
        return len(self._store.queries)

    async def count_by_author(self, author_id: ProfileId) -> int:
        return sum(1 for q in self._store.queries.values() if q.author_id == author_id)

    async def count_by_status(self, status: QueryStatus) -> int:
        return sum(1 for q in self._store.queries.values() if q.status == status)
