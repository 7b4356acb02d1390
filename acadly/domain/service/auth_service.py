"""Authentication domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from acadly.domain.error import AuthenticationError, ConflictError
from acadly.domain.model import Profile
from acadly.domain.value import ProfileId, Role

from .base import Service
from .jwt_service import JWTError, JWTService
from .password_service import PasswordService
from .profile_service import ProfileService


class AuthService(Service):
    """Registers profiles, checks credentials and resolves sessions."""

    def __init__(
        self,
        profile_service: ProfileService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize auth service.

        Args:
            profile_service: Profile domain service
            password_service: Password hashing service
            jwt_service: Session token service
        """
        self.profile_service = profile_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def register(
        self, full_name: str, email: str, password: str, role: Role
    ) -> Profile:
        """Create a profile with a hashed password and zero points.

        Args:
            full_name: Display name
            email: Login email
            password: Plain password
            role: Requested role

        Returns:
            Created profile

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("auth_service.register", email=email, role=role.value):
            if await self.profile_service.get_by_email(email):
                logfire.warn("Registration with existing email", email=email)
                raise ConflictError("Email already registered")

            profile = Profile(
                id=ProfileId(uuid4()),
                full_name=full_name,
                email=email,
                password_hash=self.password_service.hash(password),
                role=role,
                points=0,
                created_at=datetime.now(),
            )
            try:
                return await self.profile_service.save(profile)
            except IntegrityError:
                raise ConflictError("Email already registered")

    async def authenticate(self, email: str, password: str) -> Profile:
        """Check login credentials.

        Args:
            email: Login email
            password: Plain password

        Returns:
            The matching profile

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
        """
        with logfire.span("auth_service.authenticate", email=email):
            profile = await self.profile_service.get_by_email(email)
            if not profile or not self.password_service.verify(
                password, profile.password_hash
            ):
                logfire.warn("Login failed", email=email)
                raise AuthenticationError("Invalid email or password")
            logfire.info("Login succeeded", profile_id=str(profile.id))
            return profile

    def issue_token(self, profile: Profile) -> str:
        return self.jwt_service.create_token(str(profile.id))

    async def resolve_session(self, token: str | None) -> Profile:
        """Load the profile behind a session token.

        Role and points always come from the stored profile, never the token.

        Args:
            token: Session token from the cookie

        Returns:
            Current profile

        Raises:
            AuthenticationError: If the token is missing, invalid, expired, or
                its profile no longer exists
        """
        if not token:
            raise AuthenticationError()

        try:
            payload = self.jwt_service.verify_token(token)
            profile_id = ProfileId(UUID(payload.profile_id))
        except (JWTError, ValueError):
            raise AuthenticationError("Invalid or expired session")

        profile = await self.profile_service.find_by_id(profile_id)
        if not profile:
            raise AuthenticationError("Profile no longer exists")
        return profile
