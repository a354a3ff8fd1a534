"""Interface layer errors.

``PUBLIC_ERRORS`` is the one place domain errors become HTTP responses.
Messages are fixed strings: nothing from the exception (digests, row ids)
is echoed to the caller.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gate.domain.error import (
    DomainError,
    DuplicateCodeError,
    EmailMismatchError,
    ExpiredError,
    InvalidCodeError,
    ValidationError,
)


class PublicError(BaseModel):
    """Error as exposed to API clients."""

    status_code: int
    code: str
    message: str


PUBLIC_ERRORS: dict[type[DomainError], PublicError] = {
    InvalidCodeError: PublicError(
        status_code=status.HTTP_400_BAD_REQUEST,
        code="invalid_code",
        message="The invite code is not valid.",
    ),
    ExpiredError: PublicError(
        status_code=status.HTTP_410_GONE,
        code="invite_expired",
        message="The invite code has expired.",
    ),
    EmailMismatchError: PublicError(
        status_code=status.HTTP_403_FORBIDDEN,
        code="email_mismatch",
        message="The invite code was issued for a different email address.",
    ),
    DuplicateCodeError: PublicError(
        status_code=status.HTTP_409_CONFLICT,
        code="duplicate_code",
        message="An invite with this code already exists.",
    ),
    ValidationError: PublicError(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="validation_error",
        message="The request could not be processed.",
    ),
}

INTERNAL_ERROR = PublicError(
    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    code="internal_error",
    message="Something went wrong.",
)


def to_public_error(error: DomainError) -> PublicError:
    """Find the public error for a domain error, most specific class first."""
    for cls in type(error).__mro__:
        if cls in PUBLIC_ERRORS:
            return PUBLIC_ERRORS[cls]
    return INTERNAL_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as JSON."""
    public = to_public_error(exc)
    if public is INTERNAL_ERROR:
        logfire.error(
            "Unmapped domain error",
            error_type=type(exc).__name__,
            path=request.url.path,
        )
    return JSONResponse(
        status_code=public.status_code,
        content={"error": public.code, "detail": public.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an app."""
    app.add_exception_handler(DomainError, domain_error_handler)
