"""ListCompanies query handler."""

from src.application.dtos import CompanyView
from src.application.queries.company_queries import ListCompanies
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import CompanyRepository


class ListCompaniesHandler:
    """Handler for ListCompanies query."""

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    async def handle(
        self, query: ListCompanies
    ) -> Result[list[CompanyView], DomainError]:
        companies = await self._company_repo.list_all()
        return Success(value=[CompanyView.from_entity(c) for c in companies])
