"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch one user projection."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Fetch all user projections ordered by username."""
