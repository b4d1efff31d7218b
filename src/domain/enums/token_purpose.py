"""Purpose of a single-use credential token.

A user holds at most one pending token per purpose. The two purposes live
side by side and never interfere with each other.
"""

from enum import Enum


class TokenPurpose(str, Enum):
    """Which credential flow a token belongs to."""

    SET_PASSWORD = "set_password"
    """Invitation: establishes the first password and verifies the email."""

    RESET_PASSWORD = "reset_password"
    """Recovery: replaces a forgotten password."""
