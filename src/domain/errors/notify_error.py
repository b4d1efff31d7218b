"""Notification delivery errors.

Returned by notifier adapters. The credential lifecycle logs them and never
surfaces them to its caller.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotifyError(DomainError):
    """Notification could not be delivered.

    Attributes:
        recipient: Address the message was meant for.
    """

    recipient: str | None = None
