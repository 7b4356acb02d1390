"""Register use case."""

from pydantic import BaseModel

from acadly.application.usecase.common import ProfileInfo
from acadly.domain.service import AuthService
from acadly.domain.value import Role


class RegisterRequest(BaseModel):
    """Register request."""

    full_name: str
    email: str
    password: str
    role: Role = Role.FACULTY


class AuthResponse(BaseModel):
    """Authenticated profile plus the session token to set as a cookie."""

    profile: ProfileInfo
    token: str


class RegisterUseCase:
    """Use case for creating an account and starting a session."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Args:
            request: Registration details

        Returns:
            New profile and session token

        Raises:
            ConflictError: If the email is already registered
        """
        profile = await self.auth_service.register(
            full_name=request.full_name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
        return AuthResponse(
            profile=ProfileInfo.from_profile(profile),
            token=self.auth_service.issue_token(profile),
        )
