"""UpdateCompany command handler."""

from src.application.commands.company_commands import UpdateCompany
from src.application.commands.handlers.create_company_handler import (
    company_name_taken,
)
from src.application.dtos import CompanyView
from src.application.errors.resource_errors import company_not_found
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import CompanyRepository, LoggerProtocol


class UpdateCompanyHandler:
    """Handler for UpdateCompany command."""

    def __init__(
        self, company_repo: CompanyRepository, logger: LoggerProtocol
    ) -> None:
        self._company_repo = company_repo
        self._logger = logger

    async def handle(self, cmd: UpdateCompany) -> Result[CompanyView, DomainError]:
        """Handle UpdateCompany command.

        Returns:
            Success(CompanyView) with the renamed company.
            Failure(NotFoundError) if the company does not exist.
            Failure(ConflictError) if another company uses the name.
        """
        company = await self._company_repo.find_by_id(cmd.company_id)
        if company is None:
            return Failure(error=company_not_found(cmd.company_id))

        holder = await self._company_repo.find_by_name(cmd.name)
        if holder is not None and holder.id != company.id:
            return Failure(error=company_name_taken())

        if company.rename(cmd.name):
            await self._company_repo.update(company)
            self._logger.info("Company renamed", company_id=str(company.id))

        return Success(value=CompanyView.from_entity(company))
