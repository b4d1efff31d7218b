"""ReissueSetPasswordToken command handler.

Flow:
1. Load the user
2. Refuse if a password is already set
3. Issue a fresh invitation (the previous link stops working)
"""

from src.application.commands.user_commands import ReissueSetPasswordToken
from src.application.errors.resource_errors import user_not_found
from src.application.services.credential_lifecycle import CredentialLifecycle
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import UserRepository


class ReissueSetPasswordTokenHandler:
    """Handler for ReissueSetPasswordToken command."""

    def __init__(
        self, user_repo: UserRepository, lifecycle: CredentialLifecycle
    ) -> None:
        self._user_repo = user_repo
        self._lifecycle = lifecycle

    async def handle(self, cmd: ReissueSetPasswordToken) -> Result[None, DomainError]:
        """Handle ReissueSetPasswordToken command.

        Returns:
            Success(None) once the new token is stored.
            Failure(NotFoundError) if the user does not exist.
            Failure(ConflictError) if the user already has a password.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=user_not_found(cmd.user_id))

        if user.has_password:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PASSWORD_ALREADY_SET,
                    message="The user has already set a password",
                    resource_type="User",
                )
            )

        result = await self._lifecycle.issue_set_password_token(user)
        match result:
            case Success():
                return Success(value=None)
            case Failure(error=error):
                return Failure(error=error)
