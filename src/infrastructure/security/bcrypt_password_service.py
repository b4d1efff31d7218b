"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container

Security:
    - Random salt per hash, cost factor embedded in the digest
    - Constant-time comparison via bcrypt.checkpw
    - bcrypt only reads the first 72 bytes of input; longer passwords are
      pre-hashed (SHA-256, base64) so every byte still counts
"""

import base64
import hashlib

import bcrypt

from src.core.constants import BCRYPT_MAX_PASSWORD_BYTES, BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Each +1 doubles
                computation time (10 = ~60ms, 12 = ~250ms, 14 = ~1s).

        Raises:
            ValueError: If cost factor is below 10 or above 20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService(cost_factor=12)
            >>> service.hash_password("pw") != service.hash_password("pw")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(self._prepare(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise (including for a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(
                self._prepare(password), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False

    @staticmethod
    def _prepare(password: str) -> bytes:
        encoded = password.encode("utf-8")
        if len(encoded) <= BCRYPT_MAX_PASSWORD_BYTES:
            return encoded
        return base64.b64encode(hashlib.sha256(encoded).digest())
