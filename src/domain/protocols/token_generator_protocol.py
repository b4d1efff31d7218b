"""Token generator protocol.

Produces the opaque single-use tokens behind set-password and reset links.
"""

from typing import Protocol


class TokenGeneratorProtocol(Protocol):
    """Protocol for credential token generation."""

    def generate(self, length: int = 32) -> str:
        """Generate a URL-safe token from `length` random bytes.

        Args:
            length: Number of random bytes (default 32).

        Returns:
            Token containing only [A-Za-z0-9_-], no padding.
        """
        ...
