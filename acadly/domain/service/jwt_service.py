"""Session token service backed by PyJWT."""

from datetime import datetime, timedelta, timezone

import jwt
import logfire
from pydantic import BaseModel

from acadly.config import AuthSettings

from .base import Service


class JWTError(Exception):
    """Raised when a session token cannot be trusted."""


class SessionClaims(BaseModel):
    """Claims carried by a session token.

    Only the profile id is stored; role and points are reloaded from the
    profile store on every request.
    """

    sub: str
    iat: datetime
    exp: datetime

    @property
    def profile_id(self) -> str:
        return self.sub


class JWTService(Service):
    """Issues and checks the signed tokens stored in the session cookie."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, profile_id: str, now: datetime | None = None) -> str:
        """Sign a session token for a profile.

        Args:
            profile_id: Profile ID placed in the ``sub`` claim
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded token
        """
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": profile_id,
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.auth_settings.jwt_expiry_days),
        }
        token = jwt.encode(
            claims,
            self.auth_settings.jwt_secret,
            algorithm=self.auth_settings.jwt_algorithm,
        )
        logfire.debug("Session token issued", profile_id=profile_id)
        return token

    def verify_token(self, token: str) -> SessionClaims:
        """Check a token's signature and expiry.

        Args:
            token: Encoded token from the cookie

        Returns:
            Decoded claims

        Raises:
            JWTError: If the token is malformed, tampered with or expired
        """
        try:
            decoded = jwt.decode(
                token,
                self.auth_settings.jwt_secret,
                algorithms=[self.auth_settings.jwt_algorithm],
                options={"require": ["sub", "exp"]},
            )
            return SessionClaims(**decoded)
        except jwt.ExpiredSignatureError:
            logfire.info("Expired session token presented")
            raise JWTError("Token has expired")
        except (jwt.InvalidTokenError, ValueError) as e:
            logfire.warn("Invalid session token presented", error=str(e))
            raise JWTError("Invalid token")
