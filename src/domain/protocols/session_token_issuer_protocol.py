"""Session token issuer protocol.

Produces the token returned by a successful login. Swapping in a signed
implementation does not touch the credential lifecycle.
"""

from typing import Protocol

from src.domain.entities.user import User


class SessionTokenIssuerProtocol(Protocol):
    """Protocol for issuing login session tokens."""

    def issue(self, user: User) -> str:
        """Issue a session token for an authenticated user."""
        ...
