"""Domain errors package.

Usage:
    from src.domain.errors import CredentialError, CredentialMessages, NotifyError
"""

from src.domain.errors.credential_error import CredentialError, CredentialMessages
from src.domain.errors.notify_error import NotifyError

__all__ = [
    "CredentialError",
    "CredentialMessages",
    "NotifyError",
]
