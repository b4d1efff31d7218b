"""Security adapters.

Exports:
    BcryptPasswordService: PasswordHashingProtocol
    SecureTokenGenerator: TokenGeneratorProtocol
    PlaceholderSessionTokenIssuer: SessionTokenIssuerProtocol
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.placeholder_session_token_issuer import (
    PlaceholderSessionTokenIssuer,
)
from src.infrastructure.security.secure_token_generator import SecureTokenGenerator

__all__ = [
    "BcryptPasswordService",
    "PlaceholderSessionTokenIssuer",
    "SecureTokenGenerator",
]
