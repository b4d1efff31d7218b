"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt digest)
    - token columns: single-use credential tokens, cleared on consumption
      or on an expired attempt

Company association:
    - company_id references companies.id with ON DELETE SET NULL
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.core.constants import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH
from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for account and credential state.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        username: Unique login name
        email: Unique email address
        role: Usuario, Superusuario or Administrador
        company_id: Owning company (nullable)
        privacy_policy_accepted: Acceptance flag captured at creation
        password_hash: Bcrypt digest (nullable until first password)
        set_password_token / set_password_token_expires_at: invitation pair
        reset_password_token / reset_password_token_expires_at: recovery pair
        is_email_verified: True after the invitation is consumed

    Indexes:
        - ix_users_username, ix_users_email: unique
        - ix_users_set_password_token, ix_users_reset_password_token: lookups
        - ix_users_company_id: company detach on delete
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name (unique)",
    )

    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique)",
    )

    role: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Usuario, Superusuario or Administrador",
    )

    company_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Owning company (required for Usuario and Superusuario)",
    )

    privacy_policy_accepted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Bcrypt digest (null until a password is established)",
    )

    set_password_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
    )
    set_password_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    reset_password_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
    )
    reset_password_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<User("
            f"id={self.id}, "
            f"username={self.username!r}, "
            f"role={self.role!r}"
            f")>"
        )
