"""ListUsers query handler.

Company names are resolved with a single company listing instead of one
lookup per user.
"""

from src.application.dtos import UserView
from src.application.queries.user_queries import ListUsers
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols import CompanyRepository, UserRepository


class ListUsersHandler:
    """Handler for ListUsers query."""

    def __init__(
        self, user_repo: UserRepository, company_repo: CompanyRepository
    ) -> None:
        self._user_repo = user_repo
        self._company_repo = company_repo

    async def handle(self, query: ListUsers) -> Result[list[UserView], DomainError]:
        users = await self._user_repo.list_all()
        names = {c.id: c.name for c in await self._company_repo.list_all()}
        return Success(
            value=[
                UserView.from_entity(
                    user, names.get(user.company_id) if user.company_id else None
                )
                for user in users
            ]
        )
