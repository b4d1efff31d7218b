"""Notifier protocol for credential links.

Delivery is best-effort from the lifecycle's point of view: a Failure is
logged, never surfaced to the API caller.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class NotifierProtocol(Protocol):
    """Protocol for delivering set-password and reset-password links."""

    async def notify_set_password(
        self,
        email: str,
        username: str,
        token: str,
        base_url: str,
    ) -> Result[None, DomainError]:
        """Send the invitation link for establishing a first password.

        Args:
            email: Recipient address.
            username: Recipient username (for the greeting).
            token: Set-password token.
            base_url: Base URL the link is built on.

        Returns:
            Success(None) if handed off, Failure(NotifyError) otherwise.
        """
        ...

    async def notify_reset_password(
        self,
        email: str,
        username: str,
        token: str,
        base_url: str,
    ) -> Result[None, DomainError]:
        """Send the password recovery link.

        Args:
            email: Recipient address.
            username: Recipient username (for the greeting).
            token: Reset-password token.
            base_url: Frontend base URL the link is built on.

        Returns:
            Success(None) if handed off, Failure(NotifyError) otherwise.
        """
        ...
