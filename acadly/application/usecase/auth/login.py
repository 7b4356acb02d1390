"""Login use case."""

from pydantic import BaseModel

from acadly.application.usecase.auth.register import AuthResponse
from acadly.application.usecase.common import ProfileInfo
from acadly.domain.service import AuthService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login credentials

        Returns:
            Profile and session token

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        profile = await self.auth_service.authenticate(request.email, request.password)
        return AuthResponse(
            profile=ProfileInfo.from_profile(profile),
            token=self.auth_service.issue_token(profile),
        )
