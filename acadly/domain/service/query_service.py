"""Query domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from acadly.domain.error import NotFoundError
from acadly.domain.model import Profile, Query
from acadly.domain.repository import QueryRepository
from acadly.domain.value import ProfileId, QueryId, QueryStatus, QueryType

from .base import Service
from .notification_service import NotificationService
from .profile_service import ProfileService


class QueryService(Service):
    """Domain service for the query workflow."""

    def __init__(
        self,
        query_repository: QueryRepository,
        profile_service: ProfileService,
        notification_service: NotificationService,
        points_awarded: int,
    ) -> None:
        """Initialize query service.

        Args:
            query_repository: Query repository
            profile_service: Profile domain service (points ledger)
            notification_service: Notification domain service
            points_awarded: Points credited to the author on creation
        """
        self.query_repository = query_repository
        self.profile_service = profile_service
        self.notification_service = notification_service
        self.points_awarded = points_awarded

    async def create_query(
        self,
        author_id: ProfileId,
        title: str,
        description: str,
        query_type: QueryType,
    ) -> Query:
        """Raise a new query and credit its author.

        Queries always start open with no response.

        Args:
            author_id: Author profile ID
            title: Query title
            description: Query description
            query_type: Kind of query

        Returns:
            Created query
        """
        with logfire.span(
            "query_service.create_query",
            author_id=str(author_id),
            type=query_type.value,
        ):
            query = Query(
                id=QueryId(uuid4()),
                title=title,
                description=description,
                type=query_type,
                status=QueryStatus.OPEN,
                author_id=author_id,
                created_at=datetime.now(),
            )
            saved = await self.query_repository.save(query)

            await self.profile_service.award_points(author_id, self.points_awarded)

            logfire.info("Query created", query_id=str(saved.id))
            return saved

    async def respond(
        self,
        query_id: QueryId,
        responder: Profile,
        status: QueryStatus,
        response: str,
    ) -> Query:
        """Record a response on a query and notify its author.

        Any status may be set, including re-opening a resolved query.

        Args:
            query_id: Query being answered
            responder: Responding profile
            status: New status
            response: Response text

        Returns:
            Updated query

        Raises:
            NotFoundError: If the query does not exist
        """
        with logfire.span(
            "query_service.respond",
            query_id=str(query_id),
            responder_id=str(responder.id),
            status=status.value,
        ):
            updated = await self.query_repository.update_response(
                query_id, status, response, responder.id
            )
            if not updated:
                logfire.warn("Response to non-existent query", query_id=str(query_id))
                raise NotFoundError("Query", str(query_id))

            outcome = "resolved" if updated.status == QueryStatus.RESOLVED else "updated"
            await self.notification_service.notify(
                updated.author_id,
                "Query Updated",
                f'Your query "{updated.title}" has been {outcome} by {responder.full_name}',
            )

            logfire.info(
                "Query responded",
                query_id=str(query_id),
                status=status.value,
            )
            return updated

    async def list_recent(self, limit: int | None = None) -> list[Query]:
        return await self.query_repository.find_recent(limit)

    async def count(self) -> int:
        return await self.query_repository.count()

    async def count_by_author(self, author_id: ProfileId) -> int:
        return await self.query_repository.count_by_author(author_id)

    async def count_by_status(self, status: QueryStatus) -> int:
        return await self.query_repository.count_by_status(status)
