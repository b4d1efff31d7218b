"""Placeholder session token issuer (adapter).

Issues an opaque, unsigned value after a successful login. Nothing in the
service verifies it; a signed issuer can replace this class in the
container without changes to the credential lifecycle.
"""

from uuid_extensions import uuid7

from src.domain.entities.user import User


class PlaceholderSessionTokenIssuer:
    """Issue non-verifiable session tokens of the form session_<user>_<nonce>."""

    def issue(self, user: User) -> str:
        """Issue a session token for an authenticated user."""
        return f"session_{user.id.hex}_{uuid7().hex}"
