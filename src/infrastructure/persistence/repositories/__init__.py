"""Repository adapters (implement domain repository protocols)."""

from src.infrastructure.persistence.repositories.company_repository import (
    CompanyRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["CompanyRepository", "UserRepository"]
