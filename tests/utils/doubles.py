"""Test doubles and entity builders shared by the test suite."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.company import Company
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import NotifyError

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=UTC)


class FakeClock:
    """Callable clock whose current instant is set by the test."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@dataclass
class SentMessage:
    purpose: str
    email: str
    username: str
    token: str
    base_url: str


@dataclass
class RecordingNotifier:
    """Notifier that records messages; can be told to reject or raise."""

    sent: list[SentMessage] = field(default_factory=list)
    reject: bool = False
    raise_error: Exception | None = None

    async def notify_set_password(
        self, email: str, username: str, token: str, base_url: str
    ) -> Result[None, DomainError]:
        return self._record("set_password", email, username, token, base_url)

    async def notify_reset_password(
        self, email: str, username: str, token: str, base_url: str
    ) -> Result[None, DomainError]:
        return self._record("reset_password", email, username, token, base_url)

    def _record(
        self, purpose: str, email: str, username: str, token: str, base_url: str
    ) -> Result[None, DomainError]:
        if self.raise_error is not None:
            raise self.raise_error
        if self.reject:
            return Failure(
                error=NotifyError(
                    code=ErrorCode.NOTIFY_FAILED,
                    message="mailbox unavailable",
                    recipient=email,
                )
            )
        self.sent.append(SentMessage(purpose, email, username, token, base_url))
        return Success(value=None)

    def last_token(self, purpose: str) -> str:
        return [m for m in self.sent if m.purpose == purpose][-1].token


def make_company(name: str = "Acme S.A.", now: datetime = T0) -> Company:
    """Build a Company entity."""
    return Company.create(name=name, now=now)


def make_user(
    username: str = "ana",
    email: str = "ana@example.com",
    role: UserRole = UserRole.USUARIO,
    company_id: UUID | None = None,
    now: datetime = T0,
    **overrides,
) -> User:
    """Build a User entity (no password, no tokens unless overridden)."""
    user = User.create(
        username=username,
        email=email,
        role=role,
        company_id=company_id,
        privacy_policy_accepted=True,
        now=now,
    )
    for name, value in overrides.items():
        setattr(user, name, value)
    return user
