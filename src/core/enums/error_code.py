"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, *_REQUIRED)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_ALREADY_SET)
- Credential errors (TOKEN_*, INVALID_CREDENTIALS, PASSWORD_NOT_SET)
- Collaborator errors (NOTIFY_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_MISMATCH = "password_mismatch"
    COMPANY_REQUIRED = "company_required"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    COMPANY_NOT_FOUND = "company_not_found"

    # Conflict errors
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    COMPANY_NAME_ALREADY_EXISTS = "company_name_already_exists"
    PASSWORD_ALREADY_SET = "password_already_set"

    # Credential errors
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    INVALID_CREDENTIALS = "invalid_credentials"
    PASSWORD_NOT_SET = "password_not_set"

    # Collaborator errors
    NOTIFY_FAILED = "notify_failed"
