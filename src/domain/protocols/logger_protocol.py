"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Implementations MUST keep logs
structured (message + key-value context) and safe.

Security:
    - NEVER log passwords, password hashes or full tokens
    - Use src.core.constants.mask_token for token references

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("User created", user_id=str(user.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("Request started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
