"""Command handlers."""

from src.application.commands.handlers.create_company_handler import (
    CreateCompanyHandler,
)
from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_company_handler import (
    DeleteCompanyHandler,
)
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.reissue_set_password_token_handler import (
    ReissueSetPasswordTokenHandler,
)
from src.application.commands.handlers.update_company_handler import (
    UpdateCompanyHandler,
)
from src.application.commands.handlers.update_user_handler import UpdateUserHandler

__all__ = [
    "CreateCompanyHandler",
    "CreateUserHandler",
    "DeleteCompanyHandler",
    "DeleteUserHandler",
    "ReissueSetPasswordTokenHandler",
    "UpdateCompanyHandler",
    "UpdateUserHandler",
]
