"""CompanyRepository protocol for company persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.company import Company


class CompanyRepository(Protocol):
    """Company repository protocol (port)."""

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID."""
        ...

    async def find_by_name(self, name: str) -> Company | None:
        """Find company by its unique name."""
        ...

    async def exists_by_id(self, company_id: UUID) -> bool:
        """Check whether a company exists."""
        ...

    async def list_all(self) -> list[Company]:
        """Return every company ordered by name."""
        ...

    async def save(self, company: Company) -> None:
        """Create new company."""
        ...

    async def update(self, company: Company) -> None:
        """Persist changes to an existing company."""
        ...

    async def delete(self, company_id: UUID) -> None:
        """Delete company and detach its users (company_id set to None).

        Args:
            company_id: Company's unique identifier.
        """
        ...
