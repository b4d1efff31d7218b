"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (carries the offending field)
- NotFoundError: Resource not found
- ConflictError: Uniqueness or state conflicts
- AuthenticationError: Credential check failures

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.COMPANY_REQUIRED,
        message="A company is required for this role",
        field="company_id",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Company).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate value, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (username, email, name).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (unknown user, wrong password)."""

    pass
