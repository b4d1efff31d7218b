"""Credential lifecycle service.

Owns every password-establishing flow of a user account:

    issue_set_password_token   invitation token on user creation (24h)
    set_password               consume invitation, verify email
    request_password_reset     recovery token on forgot-password (1h)
    reset_password             consume recovery token
    login                      username-or-email + password check

Token Rules:
    - One pending token per purpose; issuing replaces the previous one
    - A token is valid up to and including its expiry instant
    - An expired attempt clears the token; later attempts see "not found"
    - Consumption is a compare-and-swap on the stored token, so two
      concurrent consumers cannot both succeed
    - Issuing, clearing and consuming write only the columns they change;
      a stale read never restores a consumed token

Notification Rules:
    - Delivery is scheduled after the token is persisted and runs in a
      background task; the operation returns without awaiting it
    - Delivery errors, rejections and timeouts are logged as notify_failed
      and never change the operation's result
    - wait_for_deliveries() awaits outstanding deliveries (shutdown, tests)

Login Rules:
    - An unknown identifier still pays for one password verification

Architecture:
- Application layer ONLY imports from domain/core (entities, protocols)
- Collaborators are constructor-injected
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from src.application.dtos import (
    LoginResult,
    PasswordEstablished,
    PasswordResetCompleted,
    PasswordResetRequested,
    UserView,
)
from src.core.constants import PASSWORD_MIN_LENGTH, TOKEN_BYTES, mask_token
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import TokenPurpose
from src.domain.errors import CredentialError, CredentialMessages
from src.domain.protocols import (
    CompanyRepository,
    LoggerProtocol,
    NotifierProtocol,
    PasswordHashingProtocol,
    SessionTokenIssuerProtocol,
    TokenGeneratorProtocol,
    UserRepository,
)


# Strong references to in-flight deliveries; tasks remove themselves when done.
_pending_deliveries: set[asyncio.Task[None]] = set()


def _utc_now() -> datetime:
    return datetime.now(UTC)


async def wait_for_deliveries() -> None:
    """Await every delivery scheduled on the running event loop."""
    loop = asyncio.get_running_loop()
    pending = [task for task in _pending_deliveries if task.get_loop() is loop]
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)


def validate_new_password(
    new_password: str, field: str = "new_password"
) -> ValidationError | None:
    """Check the minimum password rule.

    Args:
        new_password: Candidate password.
        field: Field name reported on failure.

    Returns:
        ValidationError if the password is blank or shorter than 8
        characters, None otherwise.
    """
    if not new_password.strip() or len(new_password) < PASSWORD_MIN_LENGTH:
        return ValidationError(
            code=ErrorCode.INVALID_PASSWORD,
            message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            field=field,
        )
    return None


class CredentialLifecycle:
    """Set-password, reset-password and login flows.

    Every operation returns a Result; expected failures are DomainError
    values. Storage and hashing faults propagate as exceptions.

    Example:
        >>> lifecycle = CredentialLifecycle(
        ...     user_repo=user_repo,
        ...     password_service=password_service,
        ...     token_generator=token_generator,
        ...     notifier=notifier,
        ...     session_token_issuer=issuer,
        ...     logger=logger,
        ...     set_password_url_base="https://api.example.com/api/v1/users",
        ...     reset_password_url_base="https://app.example.com",
        ... )
        >>> result = await lifecycle.login("ana", "s3cretpass")
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_generator: TokenGeneratorProtocol,
        notifier: NotifierProtocol,
        session_token_issuer: SessionTokenIssuerProtocol,
        logger: LoggerProtocol,
        set_password_url_base: str,
        reset_password_url_base: str,
        company_repo: CompanyRepository | None = None,
        set_password_ttl: timedelta = timedelta(hours=24),
        reset_password_ttl: timedelta = timedelta(hours=1),
        notify_timeout_seconds: float = 5.0,
        clock: Callable[[], datetime] = _utc_now,
        dummy_password_hash: str | None = None,
    ) -> None:
        """Initialize the lifecycle with its collaborators.

        Args:
            user_repo: Credential store accessor.
            password_service: Password hasher.
            token_generator: Source of opaque tokens.
            notifier: Delivers set/reset links.
            session_token_issuer: Issues the login token.
            logger: Structured logger.
            set_password_url_base: Base URL for invitation links.
            reset_password_url_base: Base URL for recovery links.
            company_repo: Used to resolve company names in login results.
            set_password_ttl: Invitation token lifetime.
            reset_password_ttl: Recovery token lifetime.
            notify_timeout_seconds: Upper bound for one delivery attempt.
            clock: Returns the current UTC instant.
            dummy_password_hash: Digest verified against when the login
                identifier is unknown. Computed on first use if omitted.
        """
        self._user_repo = user_repo
        self._company_repo = company_repo
        self._password_service = password_service
        self._token_generator = token_generator
        self._notifier = notifier
        self._session_token_issuer = session_token_issuer
        self._logger = logger
        self._set_password_url_base = set_password_url_base
        self._reset_password_url_base = reset_password_url_base
        self._ttl = {
            TokenPurpose.SET_PASSWORD: set_password_ttl,
            TokenPurpose.RESET_PASSWORD: reset_password_ttl,
        }
        self._notify_timeout_seconds = notify_timeout_seconds
        self._clock = clock
        self._dummy_password_hash = dummy_password_hash

    # -------------------------------------------------------------------------
    # Set-password (invitation)
    # -------------------------------------------------------------------------

    async def issue_set_password_token(self, user: User) -> Result[str, DomainError]:
        """Issue and deliver a fresh invitation token.

        Any previous invitation token of this user stops working.

        Args:
            user: Persisted user that needs to establish a password.

        Returns:
            Success(token). Delivery runs in the background and its problems
            never turn this into a Failure.
        """
        token = await self._issue(user, TokenPurpose.SET_PASSWORD)
        self._schedule_delivery(user, TokenPurpose.SET_PASSWORD, token)
        return Success(value=token)

    async def set_password(
        self, token: str, new_password: str
    ) -> Result[PasswordEstablished, DomainError]:
        """Consume an invitation token and establish the first password.

        Args:
            token: Token from the invitation link.
            new_password: Password chosen by the user.

        Returns:
            Success(PasswordEstablished) on success.
            Failure(ValidationError) if the password is too short.
            Failure(CredentialError) with TOKEN_NOT_FOUND or TOKEN_EXPIRED.
        """
        invalid = validate_new_password(new_password)
        if invalid is not None:
            return Failure(error=invalid)

        result = await self._consume(TokenPurpose.SET_PASSWORD, token, new_password)
        match result:
            case Success():
                return Success(value=PasswordEstablished())
            case Failure(error=error):
                return Failure(error=error)

    # -------------------------------------------------------------------------
    # Reset-password (recovery)
    # -------------------------------------------------------------------------

    async def request_password_reset(
        self, email: str
    ) -> Result[PasswordResetRequested, DomainError]:
        """Issue and deliver a recovery token if the email is registered.

        The result is identical whether or not the email exists, and the
        notifier is never awaited on the request path.

        Args:
            email: Address entered on the forgot-password form.

        Returns:
            Success(PasswordResetRequested) always.
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            self._logger.info("Password reset requested for unknown email")
            return Success(value=PasswordResetRequested())

        token = await self._issue(user, TokenPurpose.RESET_PASSWORD)
        self._schedule_delivery(user, TokenPurpose.RESET_PASSWORD, token)
        return Success(value=PasswordResetRequested())

    async def reset_password(
        self,
        token: str,
        new_password: str,
        confirm_password: str,
    ) -> Result[PasswordResetCompleted, DomainError]:
        """Consume a recovery token and replace the password.

        Args:
            token: Token from the recovery link.
            new_password: New password.
            confirm_password: Must equal new_password.

        Returns:
            Success(PasswordResetCompleted) carrying the user's email.
            Failure(ValidationError) for a short or unconfirmed password.
            Failure(CredentialError) with TOKEN_NOT_FOUND or TOKEN_EXPIRED.
        """
        invalid = validate_new_password(new_password)
        if invalid is not None:
            return Failure(error=invalid)
        if new_password != confirm_password:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_MISMATCH,
                    message="Passwords do not match",
                    field="confirm_password",
                )
            )

        result = await self._consume(TokenPurpose.RESET_PASSWORD, token, new_password)
        match result:
            case Success(value=user):
                return Success(value=PasswordResetCompleted(email=user.email))
            case Failure(error=error):
                return Failure(error=error)

    # -------------------------------------------------------------------------
    # Login
    # -------------------------------------------------------------------------

    async def login(
        self, username_or_email: str, password: str
    ) -> Result[LoginResult, DomainError]:
        """Authenticate by username or email.

        Unknown identifier and wrong password produce the same error.

        Args:
            username_or_email: Login identifier.
            password: Plaintext password.

        Returns:
            Success(LoginResult) on success.
            Failure(CredentialError) with INVALID_CREDENTIALS or
            PASSWORD_NOT_SET.
        """
        user = await self._user_repo.find_by_username_or_email(username_or_email)
        if user is None:
            self._password_service.verify_password(password, self._dummy_hash())
            self._logger.info("Login rejected", reason="unknown_identifier")
            return Failure(error=self._invalid_credentials())

        if user.password_hash is None:
            self._logger.info(
                "Login rejected", reason="password_not_set", user_id=str(user.id)
            )
            return Failure(
                error=CredentialError(
                    code=ErrorCode.PASSWORD_NOT_SET,
                    message=CredentialMessages.PASSWORD_NOT_SET,
                )
            )

        if not self._password_service.verify_password(password, user.password_hash):
            self._logger.info(
                "Login rejected", reason="password_mismatch", user_id=str(user.id)
            )
            return Failure(error=self._invalid_credentials())

        company_name = await self._company_name(user)
        self._logger.info("Login succeeded", user_id=str(user.id))
        return Success(
            value=LoginResult(
                token=self._session_token_issuer.issue(user),
                user=UserView.from_entity(user, company_name),
                can_manage_companies=user.can_manage_companies,
            )
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _issue(self, user: User, purpose: TokenPurpose) -> str:
        """Generate, attach and persist a token for `purpose`."""
        now = self._clock()
        token = self._token_generator.generate(TOKEN_BYTES)
        user.issue_token(purpose, token, now + self._ttl[purpose], now)
        await self._user_repo.store_token(user, purpose)
        self._logger.info(
            "Credential token issued",
            user_id=str(user.id),
            purpose=purpose.value,
            token_prefix=mask_token(token),
        )
        return token

    async def _consume(
        self, purpose: TokenPurpose, token: str, new_password: str
    ) -> Result[User, DomainError]:
        """Shared consumption steps for both token purposes."""
        user = await self._user_repo.find_by_token(purpose, token) if token else None
        if user is None:
            self._logger.warning(
                "Credential token not found",
                purpose=purpose.value,
                token_prefix=mask_token(token),
            )
            return Failure(error=self._token_not_found(purpose))

        now = self._clock()
        if user.is_token_expired(purpose, now):
            user.clear_token(purpose, now)
            await self._user_repo.clear_token_if_matches(user, purpose, token)
            self._logger.warning(
                "Credential token expired",
                user_id=str(user.id),
                purpose=purpose.value,
            )
            return Failure(
                error=CredentialError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message=CredentialMessages.TOKEN_EXPIRED,
                    purpose=purpose,
                )
            )

        password_hash = self._password_service.hash_password(new_password)
        user.establish_password(password_hash, purpose, now)
        written = await self._user_repo.update_if_token_matches(user, purpose, token)
        if not written:
            self._logger.warning(
                "Credential token consumed concurrently",
                user_id=str(user.id),
                purpose=purpose.value,
            )
            return Failure(error=self._token_not_found(purpose))

        self._logger.info(
            "Credential token consumed",
            user_id=str(user.id),
            purpose=purpose.value,
        )
        return Success(value=user)

    def _schedule_delivery(
        self, user: User, purpose: TokenPurpose, token: str
    ) -> None:
        """Start delivery in a background task and keep a reference to it."""
        task = asyncio.create_task(self._deliver(user, purpose, token))
        _pending_deliveries.add(task)
        task.add_done_callback(self._delivery_done)

    def _delivery_done(self, task: asyncio.Task[None]) -> None:
        _pending_deliveries.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error(
                "Credential notification task crashed",
                error=exc,
                code=ErrorCode.NOTIFY_FAILED.value,
            )

    async def _deliver(self, user: User, purpose: TokenPurpose, token: str) -> None:
        """Hand the link to the notifier; failures are logged only."""
        if purpose is TokenPurpose.SET_PASSWORD:
            send = self._notifier.notify_set_password
            base_url = self._set_password_url_base
        else:
            send = self._notifier.notify_reset_password
            base_url = self._reset_password_url_base

        try:
            result = await asyncio.wait_for(
                send(
                    email=user.email,
                    username=user.username,
                    token=token,
                    base_url=base_url,
                ),
                timeout=self._notify_timeout_seconds,
            )
        except Exception as exc:
            self._logger.error(
                "Credential notification failed",
                error=exc,
                code=ErrorCode.NOTIFY_FAILED.value,
                user_id=str(user.id),
                purpose=purpose.value,
            )
            return

        if isinstance(result, Failure):
            self._logger.warning(
                "Credential notification rejected",
                code=ErrorCode.NOTIFY_FAILED.value,
                reason=result.error.message,
                user_id=str(user.id),
                purpose=purpose.value,
            )

    def _dummy_hash(self) -> str:
        if self._dummy_password_hash is None:
            self._dummy_password_hash = self._password_service.hash_password(
                self._token_generator.generate(TOKEN_BYTES)
            )
        return self._dummy_password_hash

    async def _company_name(self, user: User) -> str | None:
        if self._company_repo is None or user.company_id is None:
            return None
        company = await self._company_repo.find_by_id(user.company_id)
        return company.name if company is not None else None

    @staticmethod
    def _token_not_found(purpose: TokenPurpose) -> CredentialError:
        return CredentialError(
            code=ErrorCode.TOKEN_NOT_FOUND,
            message=CredentialMessages.TOKEN_NOT_FOUND,
            purpose=purpose,
        )

    @staticmethod
    def _invalid_credentials() -> CredentialError:
        return CredentialError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=CredentialMessages.INVALID_CREDENTIALS,
        )
