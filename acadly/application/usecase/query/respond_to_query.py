"""Respond to query use case."""

from uuid import UUID

from pydantic import BaseModel

from acadly.application.usecase.query.create_query import QueryInfo
from acadly.domain.service import AccessPolicy, Capability, ProfileService, QueryService
from acadly.domain.value import ProfileId, QueryId, QueryStatus


class RespondToQueryRequest(BaseModel):
    """Respond to query request."""

    query_id: str  # UUID string
    response: str
    status: QueryStatus
    responder_id: str  # Profile ID from authenticated user


class RespondToQueryUseCase:
    """Use case for answering a query (HOD, dean or superadmin)."""

    def __init__(
        self,
        query_service: QueryService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize respond to query use case.

        Args:
            query_service: Query domain service
            profile_service: Profile domain service
            access_policy: Role capability policy
        """
        self.query_service = query_service
        self.profile_service = profile_service
        self.access_policy = access_policy

    async def execute(self, request: RespondToQueryRequest) -> QueryInfo:
        """Execute respond to query flow.

        Steps:
        1. Load the responder and check they may respond
        2. Record status, response and responder on the query
        3. Notify the query's author

        Args:
            request: Response details

        Returns:
            Updated query

        Raises:
            NotAuthorizedError: If the responder's role may not respond
            NotFoundError: If the query does not exist
        """
        responder = await self.profile_service.get_by_id(
            ProfileId(UUID(request.responder_id))
        )
        self.access_policy.require(responder, Capability.RESPOND_TO_QUERY)

        updated = await self.query_service.respond(
            query_id=QueryId(UUID(request.query_id)),
            responder=responder,
            status=request.status,
            response=request.response,
        )
        return QueryInfo.from_query(updated)
