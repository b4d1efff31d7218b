"""Company queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCompany:
    """Fetch one company."""

    company_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListCompanies:
    """Fetch all companies ordered by name."""
