"""Application DTOs (handler results)."""

from src.application.dtos.credential_dtos import (
    LoginResult,
    PasswordEstablished,
    PasswordResetCompleted,
    PasswordResetRequested,
)
from src.application.dtos.user_dtos import CompanyView, UserView

__all__ = [
    "CompanyView",
    "LoginResult",
    "PasswordEstablished",
    "PasswordResetCompleted",
    "PasswordResetRequested",
    "UserView",
]
