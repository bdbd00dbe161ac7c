"""Error hierarchy for the back-office.

Error layers:
- BackofficeError: Base class for all back-office errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like storage issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class BackofficeError(Exception):
    """Base class for all back-office errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(BackofficeError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class AuthorizationError(DomainError):
    """Caller not authorized for this operation.

    `code="missing_token"` means no authenticated session (401);
    `code="not_authorized"` means the caller's admin record is gone.
    """


class PasswordMismatchError(DomainError):
    """The supplied password does not match the stored credential."""

    def __init__(self) -> None:
        super().__init__("Password is incorrect", code="password_mismatch")


class InvalidTokenError(DomainError):
    """Bearer token is expired, malformed, revoked, or names an unknown admin."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, code="invalid_token")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(BackofficeError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""


def not_authorized() -> AuthorizationError:
    """The caller's backing admin record no longer exists."""
    return AuthorizationError("Admin not allowed", code="not_authorized")
