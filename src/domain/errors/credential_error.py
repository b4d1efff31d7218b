"""Credential domain errors.

Token consumption and login failures.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import CredentialError, CredentialMessages

    return Failure(error=CredentialError(
        code=ErrorCode.TOKEN_NOT_FOUND,
        message=CredentialMessages.TOKEN_NOT_FOUND,
        purpose=TokenPurpose.RESET_PASSWORD,
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.domain.enums import TokenPurpose


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialError(DomainError):
    """Token or login failure.

    Attributes:
        purpose: Token flow the failure belongs to (None for login).
    """

    purpose: TokenPurpose | None = None


class CredentialMessages:
    """User-facing messages for credential failures.

    Unknown-user and wrong-password logins share INVALID_CREDENTIALS so the
    response never reveals which usernames exist.
    """

    TOKEN_NOT_FOUND = "The link is invalid or has already been used."
    TOKEN_EXPIRED = "The link has expired. Please request a new one."
    INVALID_CREDENTIALS = "Invalid credentials"
    PASSWORD_NOT_SET = (
        "The user has not set a password yet. "
        "Check your email for the link to set your password."
    )
