"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
the category the presentation layer needs to pick an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="User creation failed",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


# Credential failures that are the caller's fault (bad or stale link).
_CREDENTIAL_VALIDATION_CODES = frozenset(
    {ErrorCode.TOKEN_NOT_FOUND, ErrorCode.TOKEN_EXPIRED}
)
_CREDENTIAL_AUTH_CODES = frozenset(
    {ErrorCode.INVALID_CREDENTIALS, ErrorCode.PASSWORD_NOT_SET}
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     CredentialError(
        ...         code=ErrorCode.TOKEN_EXPIRED,
        ...         message=CredentialMessages.TOKEN_EXPIRED,
        ...     )
        ... )
        >>> error.code
        <ApplicationErrorCode.COMMAND_VALIDATION_FAILED: 'command_validation_failed'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a domain error, choosing the category from its type and code."""
        return cls(
            code=_categorize(error),
            message=error.message,
            domain_error=error,
            details=error.details,
        )


def _categorize(error: DomainError) -> ApplicationErrorCode:
    if isinstance(error, ValidationError):
        return ApplicationErrorCode.COMMAND_VALIDATION_FAILED
    if isinstance(error, NotFoundError):
        return ApplicationErrorCode.NOT_FOUND
    if isinstance(error, ConflictError):
        return ApplicationErrorCode.CONFLICT
    if isinstance(error, AuthenticationError):
        return ApplicationErrorCode.UNAUTHORIZED
    if error.code in _CREDENTIAL_VALIDATION_CODES:
        return ApplicationErrorCode.COMMAND_VALIDATION_FAILED
    if error.code in _CREDENTIAL_AUTH_CODES:
        return ApplicationErrorCode.UNAUTHORIZED
    if error.code is ErrorCode.NOTIFY_FAILED:
        return ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
    return ApplicationErrorCode.COMMAND_EXECUTION_FAILED
