"""Domain entities (mutable, have identity)."""

from src.domain.entities.company import Company
from src.domain.entities.user import User

__all__ = ["Company", "User"]
