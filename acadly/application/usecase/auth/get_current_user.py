"""Get current user use case."""

from pydantic import BaseModel

from acadly.application.usecase.common import ProfileInfo
from acadly.domain.service import AuthService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # JWT token from the session cookie


class GetCurrentUserUseCase:
    """Use case for resolving the session cookie to a profile."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize get current user use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> ProfileInfo:
        """Execute get current user flow.

        The profile is reloaded from storage so role and points are current.

        Args:
            request: Request with the session token

        Returns:
            Current profile

        Raises:
            AuthenticationError: If there is no valid session
        """
        profile = await self.auth_service.resolve_session(request.token)
        return ProfileInfo.from_profile(profile)
