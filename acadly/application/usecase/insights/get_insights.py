"""AI insights use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from acadly.domain.service import (
    AccessPolicy,
    Capability,
    InsightsService,
    ProfileService,
)
from acadly.domain.value import ProfileId


class GetInsightsRequest(BaseModel):
    """Get insights request."""

    user_id: str  # Profile ID from authenticated user


class InsightsResponse(BaseModel):
    """Generated insights, or the deterministic fallback."""

    available: bool
    insights: dict[str, Any] | None = None
    message: str | None = None
    fallback: dict[str, Any] | None = None


class GetInsightsUseCase:
    """Use case for the dean/superadmin insights summary."""

    def __init__(
        self,
        insights_service: InsightsService,
        profile_service: ProfileService,
        access_policy: AccessPolicy,
    ) -> None:
        self.insights_service = insights_service
        self.profile_service = profile_service
        self.access_policy = access_policy

    async def execute(self, request: GetInsightsRequest) -> InsightsResponse:
        """Execute insights flow.

        Raises:
            NotAuthorizedError: If the caller is neither dean nor superadmin
        """
        profile = await self.profile_service.get_by_id(
            ProfileId(UUID(request.user_id))
        )
        self.access_policy.require(profile, Capability.VIEW_INSIGHTS)

        payload = await self.insights_service.get_insights()
        return InsightsResponse(**payload)
