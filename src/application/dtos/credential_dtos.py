"""Credential lifecycle DTOs.

Success payloads returned by CredentialLifecycle operations.
"""

from dataclasses import dataclass

from src.application.dtos.user_dtos import UserView
from src.core.constants import PASSWORD_RESET_REQUESTED_MESSAGE


@dataclass(frozen=True, kw_only=True)
class PasswordEstablished:
    """Result of consuming a set-password token."""

    message: str = "Password established successfully."


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested:
    """Result of a forgot-password request.

    Identical for known and unknown emails.
    """

    message: str = PASSWORD_RESET_REQUESTED_MESSAGE


@dataclass(frozen=True, kw_only=True)
class PasswordResetCompleted:
    """Result of consuming a reset-password token.

    Attributes:
        email: Email of the user whose password changed.
    """

    email: str
    message: str = "Password has been reset successfully."


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Result of a successful login.

    Attributes:
        token: Session token from the configured issuer.
        user: Public projection of the authenticated user.
        can_manage_companies: True for administrators.
    """

    token: str
    user: UserView
    can_manage_companies: bool
    message: str = "Login successful."
