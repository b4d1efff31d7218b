"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token generation (secrets)
- Session tokens (placeholder issuer)
- Notifier (console)
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notifier_protocol import NotifierProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.session_token_issuer_protocol import (
        SessionTokenIssuerProtocol,
    )
    from src.domain.protocols.token_generator_protocol import TokenGeneratorProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_dummy_password_hash() -> str:
    """Digest of a random secret, verified against on unknown-identifier logins.

    Hashed once with the configured cost so the unknown-identifier path
    costs the same as a wrong password.
    """
    return get_password_service().hash_password(get_token_generator().generate())


@lru_cache()
def get_token_generator() -> "TokenGeneratorProtocol":
    """Get credential token generator singleton (app-scoped)."""
    from src.infrastructure.security import SecureTokenGenerator

    return SecureTokenGenerator()


@lru_cache()
def get_session_token_issuer() -> "SessionTokenIssuerProtocol":
    """Get login token issuer singleton (app-scoped)."""
    from src.infrastructure.security import PlaceholderSessionTokenIssuer

    return PlaceholderSessionTokenIssuer()


# ============================================================================
# Notifier (Application-Scoped)
# ============================================================================


@lru_cache()
def get_notifier() -> "NotifierProtocol":
    """Get notifier singleton (app-scoped).

    ConsoleNotifier renders full links into the log only in development,
    testing and ci. In production it has no transport, so it logs the
    recipient without the link and reports Failure(NotifyError).
    A mail transport plugs in here without touching the application layer.

    Returns:
        Notifier implementing NotifierProtocol.
    """
    from src.infrastructure.email import ConsoleNotifier

    return ConsoleNotifier(
        logger=get_logger(),
        development_mode=not settings.is_production,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
