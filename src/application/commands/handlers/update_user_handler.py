"""UpdateUser command handler.

Flow:
1. Load the user
2. Validate every requested change before touching the entity
3. Apply the changes (profile fields and a forced password have
   separate writers)
4. Return Success(UserView)

Changing the role or company re-checks the role/company rule against the
resulting pair, so demoting an Administrador without a company to Usuario
is rejected unless a company is supplied in the same request.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.user_commands import UpdateUser
from src.application.dtos import UserView
from src.application.errors.resource_errors import (
    company_required,
    unknown_company_reference,
    user_not_found,
)
from src.application.services.credential_lifecycle import validate_new_password
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    CompanyRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class UpdateUserHandler:
    """Handler for UpdateUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        company_repo: CompanyRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._company_repo = company_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[UserView, DomainError]:
        """Handle UpdateUser command.

        Returns:
            Success(UserView) with the updated user.
            Failure(NotFoundError) if the user does not exist.
            Failure(ValidationError) for invalid company/role/password input.
            Failure(ConflictError) if the new email is taken.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=user_not_found(cmd.user_id))

        if cmd.email is not None and cmd.email != user.email:
            if await self._user_repo.exists_by_email(cmd.email, exclude_id=user.id):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message="Email is already registered",
                        resource_type="User",
                        conflicting_field="email",
                    )
                )

        target_role = cmd.role if cmd.role is not None else user.role
        target_company_id: UUID | None
        if cmd.remove_company:
            target_company_id = None
        elif cmd.company_id is not None:
            target_company_id = cmd.company_id
        else:
            target_company_id = user.company_id

        if not user.company_requirement_met(target_role, target_company_id):
            return Failure(error=company_required())

        company_name: str | None = None
        if target_company_id is not None:
            company = await self._company_repo.find_by_id(target_company_id)
            if company is None:
                return Failure(error=unknown_company_reference(target_company_id))
            company_name = company.name

        if cmd.new_password is not None:
            invalid = validate_new_password(cmd.new_password)
            if invalid is not None:
                return Failure(error=invalid)

        now = datetime.now(UTC)
        changed: list[str] = []

        if cmd.email is not None and cmd.email != user.email:
            user.email = cmd.email
            changed.append("email")
        if (
            cmd.privacy_policy_accepted is not None
            and cmd.privacy_policy_accepted != user.privacy_policy_accepted
        ):
            user.privacy_policy_accepted = cmd.privacy_policy_accepted
            changed.append("privacy_policy_accepted")
        if target_role != user.role:
            user.role = target_role
            changed.append("role")
        if target_company_id != user.company_id:
            user.company_id = target_company_id
            changed.append("company_id")
        if changed:
            user.updated_at = now
            await self._user_repo.update(user)

        if cmd.new_password is not None:
            user.force_password(
                self._password_service.hash_password(cmd.new_password), now
            )
            await self._user_repo.store_password(user)
            changed.append("password")

        if changed:
            self._logger.info("User updated", user_id=str(user.id), fields=changed)

        return Success(value=UserView.from_entity(user, company_name))
