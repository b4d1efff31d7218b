"""User and company DTOs (Data Transfer Objects).

Read projections handed from handlers to the presentation layer.

DTOs:
    - UserView: Public projection of a user (no hash, no tokens)
    - CompanyView: Public projection of a company
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.company import Company
from src.domain.entities.user import User
from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class UserView:
    """Public projection of a user.

    Never carries password_hash or any token field.

    Attributes:
        id: User identifier.
        username: Login name.
        email: Email address.
        role: Role.
        privacy_policy_accepted: Acceptance flag.
        company_id: Owning company (None if unassigned).
        company_name: Display name of the owning company.
        is_email_verified: True once the invitation was consumed.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    username: str
    email: str
    role: UserRole
    privacy_policy_accepted: bool
    company_id: UUID | None
    company_name: str | None
    is_email_verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User, company_name: str | None = None) -> "UserView":
        """Project a domain user."""
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            privacy_policy_accepted=user.privacy_policy_accepted,
            company_id=user.company_id,
            company_name=company_name,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class CompanyView:
    """Public projection of a company."""

    id: UUID
    name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyView":
        """Project a domain company."""
        return cls(id=company.id, name=company.name, created_at=company.created_at)
