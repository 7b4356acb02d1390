"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from acadly.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def first_validation_message(exc: RequestValidationError) -> str:
    """Render the first request validation error as "field: message".

    Args:
        exc: FastAPI request validation error

    Returns:
        Human readable message naming the offending field
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    message = first.get("msg", "Invalid value")
    if not loc:
        return message
    return f"{loc[-1]}: {message}"


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = first_validation_message(exc)
    logfire.warn("Request validation failed", path=request.url.path, detail=detail)
    return _error(status.HTTP_400_BAD_REQUEST, detail)


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.warn("Validation error", path=request.url.path, error=str(exc))
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_authentication(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_not_authorized(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    logfire.warn(
        "Capability denied",
        path=request.url.path,
        capability=exc.capability,
        profile_id=exc.profile_id,
        role=exc.role,
    )
    return _error(status.HTTP_403_FORBIDDEN, "Insufficient permissions")


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, str(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error to status code mapping on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(AuthenticationError, handle_authentication)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(Exception, handle_unexpected)
