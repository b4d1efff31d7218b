"""GetCompany query handler."""

from src.application.dtos import CompanyView
from src.application.errors.resource_errors import company_not_found
from src.application.queries.company_queries import GetCompany
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import CompanyRepository


class GetCompanyHandler:
    """Handler for GetCompany query."""

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    async def handle(self, query: GetCompany) -> Result[CompanyView, DomainError]:
        company = await self._company_repo.find_by_id(query.company_id)
        if company is None:
            return Failure(error=company_not_found(query.company_id))
        return Success(value=CompanyView.from_entity(company))
