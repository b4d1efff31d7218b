"""User domain entity with credential lifecycle state.

Pure business logic, no framework dependencies.

Credential State:
    - password_hash: None until the user establishes a password
    - set-password token pair: invitation issued when the user is created
    - reset-password token pair: issued on a forgot-password request
    - Each token pair is either fully present or fully absent
    - At most one pending token per purpose (issuing replaces)

Company Association:
    - Usuario and Superusuario must have a company
    - Administrador may have one
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.enums import TokenPurpose, UserRole


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier (UUIDv7)
        username: Unique login name
        email: Unique email address (also accepted as login identifier)
        role: Usuario, Superusuario or Administrador
        privacy_policy_accepted: Must be True at creation
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
        company_id: Owning company (required for company-bound roles)
        password_hash: Bcrypt digest, None until a password is established
        set_password_token: Pending invitation token
        set_password_token_expires_at: Expiry of the invitation token
        reset_password_token: Pending recovery token
        reset_password_token_expires_at: Expiry of the recovery token
        is_email_verified: Set once the invitation token is consumed

    Example:
        >>> user = User.create(
        ...     username="ana",
        ...     email="ana@example.com",
        ...     role=UserRole.USUARIO,
        ...     company_id=company.id,
        ...     privacy_policy_accepted=True,
        ...     now=datetime.now(UTC),
        ... )
        >>> user.has_password
        False
    """

    id: UUID
    username: str
    email: str
    role: UserRole
    privacy_policy_accepted: bool
    created_at: datetime
    updated_at: datetime
    company_id: UUID | None = None
    password_hash: str | None = None
    set_password_token: str | None = None
    set_password_token_expires_at: datetime | None = None
    reset_password_token: str | None = None
    reset_password_token_expires_at: datetime | None = None
    is_email_verified: bool = False

    @classmethod
    def create(
        cls,
        *,
        username: str,
        email: str,
        role: UserRole,
        company_id: UUID | None,
        privacy_policy_accepted: bool,
        now: datetime,
    ) -> "User":
        """Build a new user with no password and no pending tokens."""
        return cls(
            id=uuid7(),
            username=username,
            email=email,
            role=role,
            company_id=company_id,
            privacy_policy_accepted=privacy_policy_accepted,
            created_at=now,
            updated_at=now,
        )

    @property
    def has_password(self) -> bool:
        """True once a password hash has been stored."""
        return self.password_hash is not None

    @property
    def can_manage_companies(self) -> bool:
        """True for administrators."""
        return self.role.can_manage_companies

    @staticmethod
    def company_requirement_met(role: UserRole, company_id: UUID | None) -> bool:
        """Check the role/company association rule.

        Args:
            role: Role being assigned.
            company_id: Company being assigned (None for no company).

        Returns:
            bool: False when the role requires a company and none is given.
        """
        return not (role.requires_company and company_id is None)

    # -------------------------------------------------------------------------
    # Token state
    # -------------------------------------------------------------------------

    def token_for(self, purpose: TokenPurpose) -> str | None:
        """Return the pending token for a purpose (None if absent)."""
        if purpose is TokenPurpose.SET_PASSWORD:
            return self.set_password_token
        return self.reset_password_token

    def token_expiry_for(self, purpose: TokenPurpose) -> datetime | None:
        """Return the expiry of the pending token for a purpose."""
        if purpose is TokenPurpose.SET_PASSWORD:
            return self.set_password_token_expires_at
        return self.reset_password_token_expires_at

    def issue_token(
        self,
        purpose: TokenPurpose,
        token: str,
        expires_at: datetime,
        now: datetime,
    ) -> None:
        """Store a new pending token, replacing any previous one.

        Args:
            purpose: Token purpose.
            token: Opaque token value.
            expires_at: Instant after which the token is rejected.
            now: Current instant (becomes updated_at).
        """
        self._set_token_pair(purpose, token, expires_at)
        self.updated_at = now

    def is_token_expired(self, purpose: TokenPurpose, now: datetime) -> bool:
        """Check whether the pending token for a purpose has expired.

        A token is valid up to and including its expiry instant. A token
        without an expiry is treated as expired.
        """
        expires_at = self.token_expiry_for(purpose)
        if expires_at is None:
            return True
        return now > expires_at

    def clear_token(self, purpose: TokenPurpose, now: datetime) -> None:
        """Drop both fields of a token pair."""
        self._set_token_pair(purpose, None, None)
        self.updated_at = now

    # -------------------------------------------------------------------------
    # Password state
    # -------------------------------------------------------------------------

    def establish_password(
        self,
        password_hash: str,
        purpose: TokenPurpose,
        now: datetime,
    ) -> None:
        """Store a password obtained by consuming a token.

        Consuming the invitation token also proves ownership of the email
        address. A reset leaves the verification flag untouched.

        Args:
            password_hash: Digest of the new password.
            purpose: Which token was consumed.
            now: Current instant.
        """
        self.password_hash = password_hash
        self._set_token_pair(purpose, None, None)
        if purpose is TokenPurpose.SET_PASSWORD:
            self.is_email_verified = True
        self.updated_at = now

    def force_password(self, password_hash: str, now: datetime) -> None:
        """Administrative password change.

        Any pending invitation becomes pointless and is dropped.
        """
        self.password_hash = password_hash
        self._set_token_pair(TokenPurpose.SET_PASSWORD, None, None)
        self.updated_at = now

    def _set_token_pair(
        self,
        purpose: TokenPurpose,
        token: str | None,
        expires_at: datetime | None,
    ) -> None:
        if purpose is TokenPurpose.SET_PASSWORD:
            self.set_password_token = token
            self.set_password_token_expires_at = expires_at
        else:
            self.reset_password_token = token
            self.reset_password_token_expires_at = expires_at
