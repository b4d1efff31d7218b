"""Queries (CQRS read side)."""

from src.application.queries.company_queries import GetCompany, ListCompanies
from src.application.queries.user_queries import GetUser, ListUsers

__all__ = ["GetCompany", "GetUser", "ListCompanies", "ListUsers"]
