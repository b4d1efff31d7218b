"""CreateUser command handler.

Flow:
1. Require privacy policy acceptance
2. Reject duplicate username, then duplicate email
3. Enforce the role/company rule and that the company exists
4. Persist the user without a password
5. Issue and deliver the set-password token (delivery is best-effort)
6. Return Success(UserView)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime

from src.application.commands.user_commands import CreateUser
from src.application.dtos import UserView
from src.application.errors.resource_errors import (
    company_required,
    unknown_company_reference,
)
from src.application.services.credential_lifecycle import CredentialLifecycle
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.company import Company
from src.domain.entities.user import User
from src.domain.protocols import CompanyRepository, LoggerProtocol, UserRepository


class CreateUserHandler:
    """Handler for CreateUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        company_repo: CompanyRepository,
        lifecycle: CredentialLifecycle,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository.
            company_repo: Company repository (existence checks, name lookup).
            lifecycle: Issues the invitation token.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._company_repo = company_repo
        self._lifecycle = lifecycle
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[UserView, DomainError]:
        """Handle CreateUser command.

        Returns:
            Success(UserView) with the new user.
            Failure(ValidationError) for privacy or company problems.
            Failure(ConflictError) for duplicate username or email.
        """
        if not cmd.privacy_policy_accepted:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="The privacy policy must be accepted",
                    field="privacy_policy_accepted",
                )
            )

        if await self._user_repo.exists_by_username(cmd.username):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="Username is already taken",
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        if await self._user_repo.exists_by_email(cmd.email):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email is already registered",
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        if not User.company_requirement_met(cmd.role, cmd.company_id):
            return Failure(error=company_required())

        company: Company | None = None
        if cmd.company_id is not None:
            company = await self._company_repo.find_by_id(cmd.company_id)
            if company is None:
                return Failure(error=unknown_company_reference(cmd.company_id))

        user = User.create(
            username=cmd.username,
            email=cmd.email,
            role=cmd.role,
            company_id=cmd.company_id,
            privacy_policy_accepted=cmd.privacy_policy_accepted,
            now=datetime.now(UTC),
        )
        await self._user_repo.save(user)
        self._logger.info("User created", user_id=str(user.id), role=user.role.value)

        await self._lifecycle.issue_set_password_token(user)

        return Success(
            value=UserView.from_entity(user, company.name if company else None)
        )
