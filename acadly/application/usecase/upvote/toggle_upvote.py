"""Toggle upvote use case."""

from uuid import UUID

from pydantic import BaseModel

from acadly.domain.service import ProfileService, UpvoteService
from acadly.domain.value import ProfileId, RecommendationId


class ToggleUpvoteRequest(BaseModel):
    """Toggle upvote request."""

    recommendation_id: str  # UUID string
    user_id: str  # Profile ID from authenticated user


class ToggleUpvoteResponse(BaseModel):
    """Whether the user upvotes the recommendation after the toggle."""

    upvoted: bool


class ToggleUpvoteUseCase:
    """Use case for upvoting or un-upvoting a recommendation."""

    def __init__(
        self, upvote_service: UpvoteService, profile_service: ProfileService
    ) -> None:
        """Initialize toggle upvote use case.

        Args:
            upvote_service: Upvote domain service
            profile_service: Profile domain service
        """
        self.upvote_service = upvote_service
        self.profile_service = profile_service

    async def execute(self, request: ToggleUpvoteRequest) -> ToggleUpvoteResponse:
        """Execute toggle upvote flow.

        Args:
            request: Toggle upvote request

        Returns:
            New upvote state
        """
        voter = await self.profile_service.get_by_id(ProfileId(UUID(request.user_id)))
        upvoted = await self.upvote_service.toggle(
            voter, RecommendationId(UUID(request.recommendation_id))
        )
        return ToggleUpvoteResponse(upvoted=upvoted)
