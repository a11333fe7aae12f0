"""Interface layer errors and their HTTP mapping."""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateOperationError,
    NotFoundError,
    OAuthStateMismatchError,
    UnsupportedProviderError,
    ValidationError,
)
from newsdesk.util.error import UtilError

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DuplicateOperationError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UnsupportedProviderError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (OAuthStateMismatchError, status.HTTP_400_BAD_REQUEST),
    (ThirdPartyAuthorizationError, status.HTTP_401_UNAUTHORIZED),
]


def status_for(exc: Exception) -> int:
    """HTTP status for an application error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain, adapter and util errors to JSON error responses.

    Validation errors report their full message list in ``detail``; every
    other error reports its message.
    """

    async def handle_domain_error(_: Request, exc: Exception) -> JSONResponse:
        status_code = status_for(exc)
        if isinstance(exc, ValidationError):
            detail: str | list[str] = exc.messages
        else:
            detail = str(exc)
        logfire.warn(
            "Request failed",
            error_type=type(exc).__name__,
            status_code=status_code,
        )
        return JSONResponse(status_code=status_code, content={"detail": detail})

    async def handle_provider_error(
        _: Request, exc: ThirdPartyAuthorizationError
    ) -> JSONResponse:
        logger.error(f"Third-party login failed: {exc}")
        return JSONResponse(
            status_code=status_for(exc),
            content={"detail": "Third-party authorization failed"},
        )

    async def handle_util_error(_: Request, exc: UtilError) -> JSONResponse:
        logger.exception(f"Internal error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ThirdPartyAuthorizationError, handle_provider_error)
    app.add_exception_handler(UtilError, handle_util_error)
