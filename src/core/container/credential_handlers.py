"""Credential lifecycle dependency factories.

The lifecycle is request-scoped because it holds the request's
repositories; its stateless collaborators are app-scoped singletons.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_db_session,
    get_dummy_password_hash,
    get_logger,
    get_notifier,
    get_password_service,
    get_session_token_issuer,
    get_token_generator,
)

if TYPE_CHECKING:
    from src.application.services.credential_lifecycle import CredentialLifecycle


def build_credential_lifecycle(session: AsyncSession) -> "CredentialLifecycle":
    """Assemble a CredentialLifecycle bound to `session`.

    Args:
        session: Database session shared by the repositories.

    Returns:
        CredentialLifecycle wired with configured URLs and lifetimes.
    """
    from src.application.services.credential_lifecycle import CredentialLifecycle
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        UserRepository,
    )

    return CredentialLifecycle(
        user_repo=UserRepository(session=session),
        company_repo=CompanyRepository(session=session),
        password_service=get_password_service(),
        token_generator=get_token_generator(),
        notifier=get_notifier(),
        session_token_issuer=get_session_token_issuer(),
        logger=get_logger(),
        set_password_url_base=settings.set_password_url_base,
        reset_password_url_base=settings.frontend_url,
        set_password_ttl=timedelta(hours=settings.set_password_token_expire_hours),
        reset_password_ttl=timedelta(hours=settings.reset_password_token_expire_hours),
        notify_timeout_seconds=settings.notify_timeout_seconds,
        dummy_password_hash=get_dummy_password_hash(),
    )


async def get_credential_lifecycle(
    session: AsyncSession = Depends(get_db_session),
) -> "CredentialLifecycle":
    """Get CredentialLifecycle (request-scoped).

    Usage:
        @router.post("/auth/login")
        async def login(
            lifecycle: CredentialLifecycle = Depends(get_credential_lifecycle),
        ):
            result = await lifecycle.login(identifier, password)
    """
    return build_credential_lifecycle(session)
