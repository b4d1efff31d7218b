"""Password hashing protocol.

Port for one-way password hashing. The lifecycle never sees the algorithm.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Protocol for password hashing services.

    Implementations must salt every hash and compare in constant time.

    Example:
        >>> digest = password_service.hash_password("SecurePass123!")
        >>> password_service.verify_password("SecurePass123!", digest)
        True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Self-describing digest (algorithm, cost and salt embedded).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored digest.

        Args:
            password: Plaintext password to check.
            password_hash: Stored digest.

        Returns:
            True if the password matches, False otherwise (never raises on
            a malformed digest).
        """
        ...
