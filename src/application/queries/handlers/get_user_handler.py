"""GetUser query handler."""

from src.application.dtos import UserView
from src.application.errors.resource_errors import user_not_found
from src.application.queries.user_queries import GetUser
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import CompanyRepository, UserRepository


class GetUserHandler:
    """Handler for GetUser query."""

    def __init__(
        self, user_repo: UserRepository, company_repo: CompanyRepository
    ) -> None:
        self._user_repo = user_repo
        self._company_repo = company_repo

    async def handle(self, query: GetUser) -> Result[UserView, DomainError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=user_not_found(query.user_id))

        company_name = None
        if user.company_id is not None:
            company = await self._company_repo.find_by_id(user.company_id)
            company_name = company.name if company else None
        return Success(value=UserView.from_entity(user, company_name))
