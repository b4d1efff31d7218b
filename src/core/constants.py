"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import TOKEN_BYTES
    >>> token = secrets.token_urlsafe(TOKEN_BYTES)
"""

# =============================================================================
# Token and Password Rules
# =============================================================================

TOKEN_BYTES: int = 32
"""Random bytes behind every set/reset password token (256 bits)."""

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Characters of a token that may appear in logs."""

PASSWORD_MIN_LENGTH: int = 8
"""Minimum length accepted for a new password."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""bcrypt ignores input beyond this many bytes."""


# =============================================================================
# Field Limits
# =============================================================================

USERNAME_MAX_LENGTH: int = 100
EMAIL_MAX_LENGTH: int = 150
COMPANY_NAME_MAX_LENGTH: int = 150


# =============================================================================
# Timeouts
# =============================================================================

NOTIFY_TIMEOUT_DEFAULT: float = 5.0
"""Default upper bound for a notification delivery in seconds."""


# =============================================================================
# Messages
# =============================================================================

PASSWORD_RESET_REQUESTED_MESSAGE: str = (
    "If your email is registered, you will receive a link to reset your password."
)
"""Identical response for every password reset request (no enumeration)."""


def mask_token(token: str) -> str:
    """Return a log-safe prefix of a token.

    Args:
        token: Full token value.

    Returns:
        First few characters followed by an ellipsis.
    """
    if len(token) > TOKEN_LOG_PREFIX_LENGTH:
        return token[:TOKEN_LOG_PREFIX_LENGTH] + "..."
    return token
