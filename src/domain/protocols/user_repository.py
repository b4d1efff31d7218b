"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

This is also the credential store accessor: token lookups and the
compare-and-swap write that makes token consumption at-most-once.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User
from src.domain.enums import TokenPurpose


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_token: Retrieve user holding a pending token
        find_by_email: Retrieve user by email
        find_by_username_or_email: Retrieve user by either login identifier
        exists_by_username / exists_by_email: Uniqueness checks
        list_all: All users ordered by username
        save: Create new user
        update: Update profile fields
        store_token: Write one token pair
        store_password: Write an administrative password change
        update_if_token_matches: Conditional consumption write (compare-and-swap)
        clear_token_if_matches: Conditional removal of an expired token
        delete: Remove user
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_token(self, purpose: TokenPurpose, token: str) -> User | None:
        """Find the user whose pending token for `purpose` equals `token`.

        Exact match only. A token of one purpose never matches the other.

        Args:
            purpose: Which token column to search.
            token: Token value presented by the caller.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (exact match).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Find user whose username or email equals `identifier`.

        Args:
            identifier: Username or email entered at login.

        Returns:
            First matching user, None otherwise.
        """
        ...

    async def exists_by_username(
        self, username: str, exclude_id: UUID | None = None
    ) -> bool:
        """Check if another user already uses `username`."""
        ...

    async def exists_by_email(self, email: str, exclude_id: UUID | None = None) -> bool:
        """Check if another user already uses `email`."""
        ...

    async def list_all(self) -> list[User]:
        """Return every user ordered by username."""
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: User entity to persist.
        """
        ...

    async def update(self, user: User) -> None:
        """Persist the profile fields of an existing user.

        Username, email, role, company and privacy flag only. Credential
        columns are never written from here.

        Args:
            user: User entity with updated fields.
        """
        ...

    async def store_token(self, user: User, purpose: TokenPurpose) -> None:
        """Persist the token pair of `purpose` (and updated_at) only.

        The other purpose's pair and the password hash are left untouched,
        so an issuer working from a stale read cannot restore a token that
        was consumed meanwhile.

        Args:
            user: User entity carrying the new token pair.
            purpose: Which token pair to write.
        """
        ...

    async def store_password(self, user: User) -> None:
        """Persist an administrative password change.

        Args:
            user: User entity after force_password().
        """
        ...

    async def update_if_token_matches(
        self,
        user: User,
        purpose: TokenPurpose,
        expected_token: str,
    ) -> bool:
        """Persist a consumption only if the stored token is still `expected_token`.

        Two concurrent consumers of the same token both read it, but only
        the first conditional write succeeds. Writes the password hash, the
        token pair of `purpose` and the email verification flag.

        Args:
            user: User entity after establish_password().
            purpose: Which token column to compare.
            expected_token: Token value read before mutating the entity.

        Returns:
            True if the row was written, False if the token had changed.
        """
        ...

    async def clear_token_if_matches(
        self,
        user: User,
        purpose: TokenPurpose,
        expected_token: str,
    ) -> bool:
        """Drop the token pair of `purpose` if it is still `expected_token`.

        Returns:
            True if the row was written, False if the token had changed.
        """
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete user.

        Args:
            user_id: User's unique identifier.
        """
        ...
