"""DeleteCompany command handler.

Users of the deleted company are kept with company_id cleared.
"""

from src.application.commands.company_commands import DeleteCompany
from src.application.errors.resource_errors import company_not_found
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import CompanyRepository, LoggerProtocol


class DeleteCompanyHandler:
    """Handler for DeleteCompany command."""

    def __init__(
        self, company_repo: CompanyRepository, logger: LoggerProtocol
    ) -> None:
        self._company_repo = company_repo
        self._logger = logger

    async def handle(self, cmd: DeleteCompany) -> Result[None, DomainError]:
        if not await self._company_repo.exists_by_id(cmd.company_id):
            return Failure(error=company_not_found(cmd.company_id))

        await self._company_repo.delete(cmd.company_id)
        self._logger.info("Company deleted", company_id=str(cmd.company_id))
        return Success(value=None)
