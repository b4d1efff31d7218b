"""Console notifier (development/testing).

Implements NotifierProtocol by writing the would-be email through the
structured logger instead of sending it. A real transport (SMTP, SES) can
replace it in the container.

In development mode the full link appears once, in the rendered message
body, exactly as a mail would carry it. Outside development mode nothing
is delivered: the attempt is logged with the recipient and a masked token
prefix only, and the notifier reports Failure(NotifyError).
"""

from urllib.parse import urlencode

from src.core.constants import mask_token
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors.notify_error import NotifyError
from src.domain.protocols.logger_protocol import LoggerProtocol


def build_set_password_link(base_url: str, token: str) -> str:
    """Build the invitation link: {base}/set-password?token=..."""
    return f"{base_url.rstrip('/')}/set-password?{urlencode({'token': token})}"


def build_reset_password_link(base_url: str, token: str, email: str) -> str:
    """Build the recovery link: {base}/reset-password?token=...&email=..."""
    query = urlencode({"token": token, "email": email})
    return f"{base_url.rstrip('/')}/reset-password?{query}"


class ConsoleNotifier:
    """Notifier that logs messages instead of delivering them.

    Attributes:
        development_mode: Whether message bodies (with full links) are logged.
    """

    def __init__(self, logger: LoggerProtocol, development_mode: bool = False) -> None:
        """Initialize the notifier.

        Args:
            logger: Structured logger receiving the rendered messages.
            development_mode: If True, log message bodies instead of refusing.
        """
        self._logger = logger
        self.development_mode = development_mode

        if self.development_mode:
            self._logger.info("Notifier in development mode (emails will be logged)")
        else:
            self._logger.warning(
                "Notifier has no mail transport; credential emails will not be sent"
            )

    async def notify_set_password(
        self,
        email: str,
        username: str,
        token: str,
        base_url: str,
    ) -> Result[None, DomainError]:
        """Log the invitation email."""
        if not self.development_mode:
            return self._undelivered("Set-password email", email, token)
        link = build_set_password_link(base_url, token)
        body = (
            f"Hello {username},\n\n"
            "An account has been created for you. "
            f"Set your password here: {link}\n\n"
            "This link expires in 24 hours."
        )
        self._logger.info(
            "Set-password email (console)",
            to_email=email,
            token_prefix=mask_token(token),
            body=body,
        )
        return Success(value=None)

    async def notify_reset_password(
        self,
        email: str,
        username: str,
        token: str,
        base_url: str,
    ) -> Result[None, DomainError]:
        """Log the password recovery email."""
        if not self.development_mode:
            return self._undelivered("Reset-password email", email, token)
        link = build_reset_password_link(base_url, token, email)
        body = (
            f"Hello {username},\n\n"
            "We received a request to reset your password. "
            f"Choose a new one here: {link}\n\n"
            "This link expires in 1 hour. If you did not request it, ignore this email."
        )
        self._logger.info(
            "Reset-password email (console)",
            to_email=email,
            token_prefix=mask_token(token),
            body=body,
        )
        return Success(value=None)

    def _undelivered(
        self, subject: str, email: str, token: str
    ) -> Result[None, DomainError]:
        self._logger.warning(
            f"{subject} not sent (no transport)",
            to_email=email,
            token_prefix=mask_token(token),
        )
        return Failure(
            error=NotifyError(
                code=ErrorCode.NOTIFY_FAILED,
                message="No mail transport configured",
                recipient=email,
            )
        )
