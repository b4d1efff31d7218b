"""API v1 routers.

Resources:
    /api/v1/auth       - Login and password reset
    /api/v1/users      - User management and invitations
    /api/v1/companies  - Company management
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth import auth_router
from src.presentation.routers.api.v1.companies import companies_router
from src.presentation.routers.api.v1.users import users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth_router)
v1_router.include_router(users_router)
v1_router.include_router(companies_router)

__all__ = [
    "v1_router",
]
