"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import UserCreateRequest, LoginResponse
"""

from src.schemas.auth_schemas import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    ResetPasswordResponse,
)
from src.schemas.company_schemas import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)
from src.schemas.user_schemas import (
    SetPasswordRequest,
    SetPasswordResponse,
    SetPasswordTokenCreateResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    # Auth
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "LoginRequest",
    "LoginResponse",
    "ResetPasswordRequest",
    "ResetPasswordResponse",
    # Companies
    "CompanyCreateRequest",
    "CompanyResponse",
    "CompanyUpdateRequest",
    # Users
    "SetPasswordRequest",
    "SetPasswordResponse",
    "SetPasswordTokenCreateResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
