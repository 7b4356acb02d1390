"""Query repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from acadly.domain.model import Query
from acadly.domain.value import ProfileId, QueryId, QueryStatus


class QueryRepository(ABC):
    """Repository for Query entity."""

    @abstractmethod
    async def find_by_id(self, query_id: QueryId) -> Optional[Query]:
        """Find a query by ID.

        Args:
            query_id: The query's unique identifier

        Returns:
            The query if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: Optional[int] = None) -> List[Query]:
        """Find queries, newest first.

        Args:
            limit: Maximum number to return (None for all)

        Returns:
            Queries ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, query: Query) -> Query:
        """Save a new query."""
        pass

    @abstractmethod
    async def update_response(
        self,
        query_id: QueryId,
        status: QueryStatus,
        response: str,
        responder_id: ProfileId,
    ) -> Optional[Query]:
        """Record a responder's answer on a query.

        Sets status, response and responder together.

        Args:
            query_id: Query to update
            status: New status
            response: Response text
            responder_id: Responding profile

        Returns:
            The updated query, or None if it does not exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all queries."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: ProfileId) -> int:
        """Count queries raised by a profile."""
        pass

    @abstractmethod
    async def count_by_status(self, status: QueryStatus) -> int:
        """Count queries in a given status."""
        pass
