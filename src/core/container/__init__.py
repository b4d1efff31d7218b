"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_credential_lifecycle, ...

The container is organized into modules:
- infrastructure: Core services (db, hashing, tokens, notifier, logging)
- credential_handlers: CredentialLifecycle factory
- management_handlers: User and company handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_dummy_password_hash,
    get_logger,
    get_notifier,
    get_password_service,
    get_session_token_issuer,
    get_token_generator,
)

# Credential lifecycle
from src.core.container.credential_handlers import (
    build_credential_lifecycle,
    get_credential_lifecycle,
)

# User and company handlers
from src.core.container.management_handlers import (
    get_create_company_handler,
    get_create_user_handler,
    get_delete_company_handler,
    get_delete_user_handler,
    get_get_company_handler,
    get_get_user_handler,
    get_list_companies_handler,
    get_list_users_handler,
    get_reissue_set_password_token_handler,
    get_update_company_handler,
    get_update_user_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_dummy_password_hash",
    "get_logger",
    "get_notifier",
    "get_password_service",
    "get_session_token_issuer",
    "get_token_generator",
    # Credential lifecycle
    "build_credential_lifecycle",
    "get_credential_lifecycle",
    # Handlers
    "get_create_company_handler",
    "get_create_user_handler",
    "get_delete_company_handler",
    "get_delete_user_handler",
    "get_get_company_handler",
    "get_get_user_handler",
    "get_list_companies_handler",
    "get_list_users_handler",
    "get_reissue_set_password_token_handler",
    "get_update_company_handler",
    "get_update_user_handler",
]
