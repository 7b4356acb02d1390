"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, EmailStr, Field

from acadly.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from acadly.application.usecase.common import MessageResponse, ProfileInfo
from acadly.config import AuthSettings
from acadly.domain.value import Role
from acadly.interface.api.session import (
    clear_session_cookie,
    require_profile,
    set_session_cookie,
)

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering a profile."""

    full_name: str = Field(min_length=2, max_length=200)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    role: Role = Role.FACULTY


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: EmailStr
    password: str = Field(min_length=1)


@router.post(
    "/register", response_model=ProfileInfo, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileInfo:
    """Register a new profile and start a session.

    Args:
        request: Registration data
        response: FastAPI response object (session cookie is set on it)
        register_use_case: Register use case from DI
        auth_settings: Auth settings from DI

    Returns:
        Created profile, without the password hash

    Raises:
        ConflictError: If the email is already registered (409)
    """
    result = await register_use_case.execute(
        RegisterRequest(
            full_name=request.full_name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
    )
    set_session_cookie(response, result.token, auth_settings)
    logfire.info("Profile registered", profile_id=result.profile.id)
    return result.profile


@router.post("/login", response_model=ProfileInfo)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileInfo:
    """Log in with email and password.

    Raises:
        AuthenticationError: On bad credentials (401)
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    set_session_cookie(response, result.token, auth_settings)
    return result.profile


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Logout by clearing the session cookie."""
    clear_session_cookie(response, auth_settings)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=ProfileInfo)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ProfileInfo:
    """Get the current profile.

    Role and points are read fresh from storage on every call.
    """
    return await require_profile(get_current_user_use_case, auth_token)
