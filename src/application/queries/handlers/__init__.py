"""Query handlers."""

from src.application.queries.handlers.get_company_handler import GetCompanyHandler
from src.application.queries.handlers.get_user_handler import GetUserHandler
from src.application.queries.handlers.list_companies_handler import (
    ListCompaniesHandler,
)
from src.application.queries.handlers.list_users_handler import ListUsersHandler

__all__ = [
    "GetCompanyHandler",
    "GetUserHandler",
    "ListCompaniesHandler",
    "ListUsersHandler",
]
