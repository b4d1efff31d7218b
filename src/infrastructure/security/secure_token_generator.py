"""Secure token generator (adapter).

Implements TokenGeneratorProtocol with the operating system CSPRNG.

Tokens are URL-safe base64 without padding, so they can be placed in a
query string as-is. 32 bytes yield a 43-character token.
"""

import secrets

from src.core.constants import TOKEN_BYTES


class SecureTokenGenerator:
    """Generate opaque single-use credential tokens.

    Example:
        >>> token = SecureTokenGenerator().generate()
        >>> len(token)
        43
    """

    def generate(self, length: int = TOKEN_BYTES) -> str:
        """Generate a URL-safe token.

        Args:
            length: Number of random bytes (default 32).

        Returns:
            Token containing only [A-Za-z0-9_-].

        Raises:
            ValueError: If length is not positive.
        """
        if length <= 0:
            raise ValueError("Token length must be positive")
        return secrets.token_urlsafe(length)
