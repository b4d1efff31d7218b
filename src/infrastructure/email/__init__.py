"""Notifier implementations.

This package contains notifier adapters:
- ConsoleNotifier: Logs emails for development/testing
"""

from src.infrastructure.email.console_notifier import (
    ConsoleNotifier,
    build_reset_password_link,
    build_set_password_link,
)

__all__ = [
    "ConsoleNotifier",
    "build_reset_password_link",
    "build_set_password_link",
]
