"""DeleteUser command handler."""

from src.application.commands.user_commands import DeleteUser
from src.application.errors.resource_errors import user_not_found
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class DeleteUserHandler:
    """Handler for DeleteUser command.

    Deletion is permanent; pending tokens disappear with the row.
    """

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, DomainError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=user_not_found(cmd.user_id))

        await self._user_repo.delete(user.id)
        self._logger.info("User deleted", user_id=str(user.id))
        return Success(value=None)
