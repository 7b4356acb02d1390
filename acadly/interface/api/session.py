"""Session cookie helpers shared by routes."""

from fastapi import Response

from acadly.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from acadly.application.usecase.common import ProfileInfo
from acadly.config import AuthSettings

# Must match the `auth_token` Cookie parameter of every protected route
SESSION_COOKIE = "auth_token"


async def require_profile(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> ProfileInfo:
    """Resolve the authenticated profile for a request.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Current profile, reloaded from storage

    Raises:
        AuthenticationError: If the session is missing or invalid
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )


def set_session_cookie(response: Response, token: str, settings: AuthSettings) -> None:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: AuthSettings) -> None:
    response.delete_cookie(key=SESSION_COOKIE, path="/")
