"""Company management commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateCompany:
    """Create a company with a unique name."""

    name: str


@dataclass(frozen=True, kw_only=True)
class UpdateCompany:
    """Rename a company."""

    company_id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class DeleteCompany:
    """Delete a company; its users are kept and detached."""

    company_id: UUID
