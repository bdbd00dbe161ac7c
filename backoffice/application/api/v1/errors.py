"""Centralized error transformation for API routes.

Maps back-office errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from backoffice.domain.shared.error import (
    AuthorizationError,
    BackofficeError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidStateError,
    InvalidTokenError,
    NotFoundError,
    PasswordMismatchError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    InvalidStateError: 409,
    ConflictError: 409,
    AuthorizationError: 403,
    PasswordMismatchError: 400,
    InvalidTokenError: 401,
}

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def map_error(error: BackofficeError) -> HTTPException:
    """Map a back-office error to an HTTPException.

    Args:
        error: The error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        # Distinguish 401 (unauthenticated) from 403 (unauthorized)
        if isinstance(error, AuthorizationError) and error.code == "missing_token":
            return HTTPException(status_code=401, detail=detail, headers=_BEARER_CHALLENGE)
        if isinstance(error, InvalidTokenError):
            return HTTPException(status_code=401, detail=detail, headers=_BEARER_CHALLENGE)
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown BackofficeError subclasses
    return HTTPException(status_code=500, detail=detail)
