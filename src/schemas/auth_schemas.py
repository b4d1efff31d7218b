"""Authentication request/response schemas.

Endpoints:
    POST /api/v1/auth/login            - Username-or-email login
    POST /api/v1/auth/forgot-password  - Request a reset link
    POST /api/v1/auth/reset-password   - Consume a reset token
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.application.dtos import LoginResult
from src.core.constants import PASSWORD_RESET_REQUESTED_MESSAGE
from src.schemas.user_schemas import UserResponse


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK
    """

    username_or_email: str = Field(
        ...,
        min_length=1,
        description="Username or email address",
        examples=["ana"],
    )
    password: str = Field(..., description="Password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username_or_email": "ana@example.com",
                "password": "s3cretpass",
            }
        }
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    message: str
    token: str = Field(..., description="Opaque session token")
    user: UserResponse
    can_manage_companies: bool

    @classmethod
    def from_dto(cls, dto: LoginResult) -> "LoginResponse":
        """Convert application DTO to response schema."""
        return cls(
            message=dto.message,
            token=dto.token,
            user=UserResponse.from_dto(dto.user),
            can_manage_companies=dto.can_manage_companies,
        )


# =============================================================================
# Password reset
# =============================================================================


class ForgotPasswordRequest(BaseModel):
    """Request schema for a reset link.

    POST /api/v1/auth/forgot-password
    Returns: 200 OK (always, to prevent user enumeration)
    """

    email: EmailStr = Field(
        ...,
        description="Email address of the account",
        examples=["ana@example.com"],
    )


class ForgotPasswordResponse(BaseModel):
    """Response schema for a reset request (identical for every email)."""

    message: str = Field(
        default=PASSWORD_RESET_REQUESTED_MESSAGE,
        description="Generic success message",
    )


class ResetPasswordRequest(BaseModel):
    """Request schema for consuming a reset token.

    POST /api/v1/auth/reset-password
    Returns: 200 OK
    """

    token: str = Field(..., description="Token from the reset link")
    new_password: str = Field(..., description="New password (min 8 chars)")
    confirm_password: str = Field(..., description="Must equal new_password")


class ResetPasswordResponse(BaseModel):
    """Response schema for a completed reset."""

    message: str
    email: str
