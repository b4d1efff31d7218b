"""Application services."""

from src.application.services.credential_lifecycle import (
    CredentialLifecycle,
    validate_new_password,
)

__all__ = ["CredentialLifecycle", "validate_new_password"]
