"""Factories for the resource errors shared by user and company handlers."""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError


def user_not_found(user_id: UUID) -> NotFoundError:
    """User lookup by ID failed."""
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message=f"User with ID '{user_id}' does not exist",
        resource_type="User",
        resource_id=str(user_id),
    )


def company_not_found(company_id: UUID) -> NotFoundError:
    """Company lookup by ID failed."""
    return NotFoundError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message=f"Company with ID '{company_id}' does not exist",
        resource_type="Company",
        resource_id=str(company_id),
    )


def unknown_company_reference(company_id: UUID) -> ValidationError:
    """A user payload references a company that does not exist."""
    return ValidationError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message=f"Company with ID '{company_id}' does not exist",
        field="company_id",
    )


def company_required() -> ValidationError:
    """The role requires a company and none was given."""
    return ValidationError(
        code=ErrorCode.COMPANY_REQUIRED,
        message="A company is required for the Usuario and Superusuario roles",
        field="company_id",
    )
