"""Interface layer errors and HTTP error rendering.

Every failure leaves the API as ``{"status": ..., "message": ...}``:
``"fail"`` for client errors, ``"error"`` for server errors. Domain errors
are mapped to status codes in one table, walking the exception's MRO so a
subclass without an entry inherits its parent's status.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from agora.domain.error import (
    AlreadyBannedError,
    AlreadySubscribedError,
    AlreadyVotedError,
    BannedFromCommunityError,
    CannotBanCreatorError,
    CommunityDeletionForbiddenError,
    CommunityNameTakenError,
    ConcurrentVoteError,
    ConsistencyError,
    DomainError,
    InsufficientKarmaError,
    InvalidCommunityNameError,
    NotAuthorizedError,
    NotBannedError,
    NotCommunityCreatorError,
    NotFoundError,
    NotModeratorError,
    NotSubscribedError,
    NotVotedError,
    ValidationError,
)

GENERIC_SERVER_ERROR = "Something went wrong"


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Raised when a protected route is called without a valid auth token."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


DOMAIN_ERROR_STATUS: dict[type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyVotedError: status.HTTP_400_BAD_REQUEST,
    NotVotedError: status.HTTP_400_BAD_REQUEST,
    AlreadyBannedError: status.HTTP_400_BAD_REQUEST,
    NotBannedError: status.HTTP_400_BAD_REQUEST,
    AlreadySubscribedError: status.HTTP_400_BAD_REQUEST,
    NotSubscribedError: status.HTTP_400_BAD_REQUEST,
    InsufficientKarmaError: status.HTTP_400_BAD_REQUEST,
    InvalidCommunityNameError: status.HTTP_400_BAD_REQUEST,
    CommunityNameTakenError: status.HTTP_400_BAD_REQUEST,
    NotModeratorError: status.HTTP_400_BAD_REQUEST,
    CannotBanCreatorError: status.HTTP_400_BAD_REQUEST,
    NotCommunityCreatorError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotAuthorizedError: status.HTTP_401_UNAUTHORIZED,
    BannedFromCommunityError: status.HTTP_403_FORBIDDEN,
    CommunityDeletionForbiddenError: status.HTTP_403_FORBIDDEN,
    ConcurrentVoteError: status.HTTP_409_CONFLICT,
    DomainError: status.HTTP_400_BAD_REQUEST,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for cls in type(error).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "fail" if status_code < 500 else "error",
            "message": message,
        },
    )


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    status_code = status_for(exc)
    logfire.info(
        "Request failed",
        error=type(exc).__name__,
        status_code=status_code,
        path=request.url.path,
    )
    return error_response(status_code, str(exc))


async def handle_consistency_error(request: Request, exc: Exception) -> JSONResponse:
    # Stored state is broken; details go to the logs, not the client
    logfire.error(
        "Consistency error",
        error=type(exc).__name__,
        detail=str(exc),
        path=request.url.path,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR)


async def handle_authentication_error(
    request: Request, exc: Exception
) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_http_exception(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    return error_response(exc.status_code, str(exc.detail))


async def handle_request_validation_error(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in errors
    )
    return error_response(422, message or "Invalid request")


async def handle_model_validation_error(
    request: Request, exc: Exception
) -> JSONResponse:
    assert isinstance(exc, PydanticValidationError)
    message = "; ".join(e["msg"] for e in exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unexpected error",
        error=type(exc).__name__,
        detail=str(exc),
        path=request.url.path,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope on every failure path.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ConsistencyError, handle_consistency_error)
    app.add_exception_handler(AuthenticationRequiredError, handle_authentication_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
