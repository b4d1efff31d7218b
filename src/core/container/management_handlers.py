"""User and company handler dependency factories.

Request-scoped handler instances for the administration endpoints.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.credential_handlers import build_credential_lifecycle
from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateCompanyHandler,
        CreateUserHandler,
        DeleteCompanyHandler,
        DeleteUserHandler,
        ReissueSetPasswordTokenHandler,
        UpdateCompanyHandler,
        UpdateUserHandler,
    )
    from src.application.queries.handlers import (
        GetCompanyHandler,
        GetUserHandler,
        ListCompaniesHandler,
        ListUsersHandler,
    )


# ============================================================================
# User Handler Factories
# ============================================================================


async def get_create_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateUserHandler":
    """Get CreateUser command handler (request-scoped).

    Dependencies:
    - UserRepository, CompanyRepository (request-scoped, share session)
    - CredentialLifecycle (issues the invitation)
    - Logger (app-scoped singleton)
    """
    from src.application.commands.handlers import CreateUserHandler
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return CreateUserHandler(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
        lifecycle=build_credential_lifecycle(session),
        logger=get_logger(),
    )


async def get_update_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateUserHandler":
    """Get UpdateUser command handler (request-scoped)."""
    from src.application.commands.handlers import UpdateUserHandler
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return UpdateUserHandler(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_delete_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteUserHandler":
    """Get DeleteUser command handler (request-scoped)."""
    from src.application.commands.handlers import DeleteUserHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return DeleteUserHandler(
        user_repo=UserRepository(session=session), logger=get_logger()
    )


async def get_reissue_set_password_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ReissueSetPasswordTokenHandler":
    """Get ReissueSetPasswordToken command handler (request-scoped)."""
    from src.application.commands.handlers import ReissueSetPasswordTokenHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return ReissueSetPasswordTokenHandler(
        user_repo=UserRepository(session=session),
        lifecycle=build_credential_lifecycle(session),
    )


async def get_get_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserHandler":
    """Get GetUser query handler (request-scoped)."""
    from src.application.queries.handlers import GetUserHandler
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return GetUserHandler(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
    )


async def get_list_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListUsersHandler":
    """Get ListUsers query handler (request-scoped)."""
    from src.application.queries.handlers import ListUsersHandler
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return ListUsersHandler(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
    )


# ============================================================================
# Company Handler Factories
# ============================================================================


async def get_create_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateCompanyHandler":
    """Get CreateCompany command handler (request-scoped)."""
    from src.application.commands.handlers import CreateCompanyHandler
    from src.infrastructure.persistence.repositories import CompanyRepository

    return CreateCompanyHandler(
        company_repo=CompanyRepository(session=session), logger=get_logger()
    )


async def get_update_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateCompanyHandler":
    """Get UpdateCompany command handler (request-scoped)."""
    from src.application.commands.handlers import UpdateCompanyHandler
    from src.infrastructure.persistence.repositories import CompanyRepository

    return UpdateCompanyHandler(
        company_repo=CompanyRepository(session=session), logger=get_logger()
    )


async def get_delete_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteCompanyHandler":
    """Get DeleteCompany command handler (request-scoped)."""
    from src.application.commands.handlers import DeleteCompanyHandler
    from src.infrastructure.persistence.repositories import CompanyRepository

    return DeleteCompanyHandler(
        company_repo=CompanyRepository(session=session), logger=get_logger()
    )


async def get_get_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCompanyHandler":
    """Get GetCompany query handler (request-scoped)."""
    from src.application.queries.handlers import GetCompanyHandler
    from src.infrastructure.persistence.repositories import CompanyRepository

    return GetCompanyHandler(company_repo=CompanyRepository(session=session))


async def get_list_companies_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListCompaniesHandler":
    """Get ListCompanies query handler (request-scoped)."""
    from src.application.queries.handlers import ListCompaniesHandler
    from src.infrastructure.persistence.repositories import CompanyRepository

    return ListCompaniesHandler(company_repo=CompanyRepository(session=session))
