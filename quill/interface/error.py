"""Interface layer errors.

Maps domain errors onto HTTP responses. Routes catch ``DomainError`` and
re-raise the result of ``to_http_exception``.
"""

import logfire
from fastapi import HTTPException, status

from quill.domain.error import (
    AuthenticationRequiredError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException carrying the matching status code
    """
    if isinstance(error, ValidationError):
        logfire.info("Request rejected", field=error.field, message=error.message)
        return HTTPException(
            status_code=422,
            detail={"field": error.field, "message": error.message},
        )
    if isinstance(error, AuthenticationRequiredError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(error),
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )

    logfire.error("Unmapped domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(error),
    )
