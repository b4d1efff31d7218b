"""Company request/response schemas.

Endpoints:
    GET    /api/v1/companies       - List companies (ordered by name)
    GET    /api/v1/companies/{id}  - Get company
    POST   /api/v1/companies       - Create company
    PUT    /api/v1/companies/{id}  - Rename company
    DELETE /api/v1/companies/{id}  - Delete company (users are detached)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import CompanyView
from src.core.constants import COMPANY_NAME_MAX_LENGTH


class CompanyCreateRequest(BaseModel):
    """Request schema for company creation (also used for rename)."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=COMPANY_NAME_MAX_LENGTH,
        description="Unique company name",
        examples=["Acme S.A."],
    )


class CompanyUpdateRequest(CompanyCreateRequest):
    """Request schema for renaming a company."""


class CompanyResponse(BaseModel):
    """Company representation."""

    id: UUID
    name: str
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: CompanyView) -> "CompanyResponse":
        """Convert application DTO to response schema."""
        return cls(id=dto.id, name=dto.name, created_at=dto.created_at)
