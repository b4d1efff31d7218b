"""CreateCompany command handler.

Flow:
1. Reject a name that is already used
2. Persist the company
3. Return Success(CompanyView)
"""

from datetime import UTC, datetime

from src.application.commands.company_commands import CreateCompany
from src.application.dtos import CompanyView
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.company import Company
from src.domain.protocols import CompanyRepository, LoggerProtocol


def company_name_taken() -> ConflictError:
    """Another company already uses this name."""
    return ConflictError(
        code=ErrorCode.COMPANY_NAME_ALREADY_EXISTS,
        message="A company with this name already exists",
        resource_type="Company",
        conflicting_field="name",
    )


class CreateCompanyHandler:
    """Handler for CreateCompany command."""

    def __init__(
        self, company_repo: CompanyRepository, logger: LoggerProtocol
    ) -> None:
        self._company_repo = company_repo
        self._logger = logger

    async def handle(self, cmd: CreateCompany) -> Result[CompanyView, DomainError]:
        """Handle CreateCompany command.

        Returns:
            Success(CompanyView) with the new company.
            Failure(ConflictError) if the name is taken.
        """
        if await self._company_repo.find_by_name(cmd.name) is not None:
            return Failure(error=company_name_taken())

        company = Company.create(name=cmd.name, now=datetime.now(UTC))
        await self._company_repo.save(company)
        self._logger.info("Company created", company_id=str(company.id))
        return Success(value=CompanyView.from_entity(company))
