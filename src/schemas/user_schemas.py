"""User request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    GET    /api/v1/users                          - List users
    GET    /api/v1/users/{id}                     - Get user
    POST   /api/v1/users                          - Create user (sends invitation)
    PUT    /api/v1/users/{id}                     - Update user
    DELETE /api/v1/users/{id}                     - Delete user
    POST   /api/v1/users/set-password             - Consume invitation token
    POST   /api/v1/users/{id}/set-password-tokens - Resend invitation
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.application.dtos import UserView
from src.core.constants import USERNAME_MAX_LENGTH
from src.domain.enums import UserRole


class UserCreateRequest(BaseModel):
    """Request schema for user creation.

    POST /api/v1/users
    Returns: 201 Created
    """

    username: str = Field(
        ...,
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        description="Unique login name",
        examples=["ana"],
    )
    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["ana@example.com"],
    )
    privacy_policy_accepted: bool = Field(
        ...,
        description="Must be true",
    )
    role: UserRole = Field(
        ...,
        description="Usuario, Superusuario or Administrador",
        examples=["Usuario"],
    )
    company_id: UUID | None = Field(
        default=None,
        description="Owning company (required for Usuario and Superusuario)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "ana",
                "email": "ana@example.com",
                "privacy_policy_accepted": True,
                "role": "Usuario",
                "company_id": "0190b2a4-8d6e-7c3a-9f21-3b5a2e7d4c10",
            }
        }
    )


class UserUpdateRequest(BaseModel):
    """Request schema for a partial user update.

    PUT /api/v1/users/{id}
    Returns: 204 No Content

    Omitted fields are left unchanged.
    """

    email: EmailStr | None = None
    privacy_policy_accepted: bool | None = None
    role: UserRole | None = None
    company_id: UUID | None = None
    remove_company: bool = Field(
        default=False,
        description="Detach the user from its company",
    )
    new_password: str | None = Field(
        default=None,
        description="Administrative password change (min 8 chars)",
    )


class UserResponse(BaseModel):
    """Public user representation (no hash, no tokens)."""

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
    def from_dto(cls, dto: UserView) -> "UserResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            username=dto.username,
            email=dto.email,
            role=dto.role,
            privacy_policy_accepted=dto.privacy_policy_accepted,
            company_id=dto.company_id,
            company_name=dto.company_name,
            is_email_verified=dto.is_email_verified,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class SetPasswordRequest(BaseModel):
    """Request schema for consuming an invitation token.

    POST /api/v1/users/set-password
    Returns: 200 OK
    """

    token: str = Field(..., description="Token from the invitation link")
    new_password: str = Field(..., description="New password (min 8 chars)")


class SetPasswordResponse(BaseModel):
    """Response schema for an established password."""

    message: str


class SetPasswordTokenCreateResponse(BaseModel):
    """Response schema for a resent invitation (202 Accepted)."""

    message: str = Field(
        default="A new set-password link has been sent.",
        description="Success message",
    )
