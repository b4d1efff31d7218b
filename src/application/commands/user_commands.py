"""User management commands (CQRS write operations).

Commands represent operator intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CreateUser:
    """Create a user without a password and send the invitation.

    Attributes:
        username: Unique login name.
        email: Unique email address.
        role: Role to assign.
        company_id: Owning company (required for Usuario and Superusuario).
        privacy_policy_accepted: Must be True.

    Example:
        >>> command = CreateUser(
        ...     username="ana",
        ...     email="ana@example.com",
        ...     role=UserRole.USUARIO,
        ...     company_id=company_id,
        ...     privacy_policy_accepted=True,
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    email: str
    role: UserRole
    company_id: UUID | None
    privacy_policy_accepted: bool


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Partially update a user.

    None means "leave unchanged".

    Attributes:
        user_id: User to update.
        email: New email (must stay unique).
        privacy_policy_accepted: New acceptance flag.
        role: New role.
        company_id: New company.
        remove_company: Detach the user from its company.
        new_password: Administrative password change.
    """

    user_id: UUID
    email: str | None = None
    privacy_policy_accepted: bool | None = None
    role: UserRole | None = None
    company_id: UUID | None = None
    remove_company: bool = False
    new_password: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ReissueSetPasswordToken:
    """Send a fresh invitation to a user that has not set a password yet."""

    user_id: UUID
