"""Domain enums for business logic.

Available Enums:
    - UserRole: Usuario, Superusuario, Administrador
    - TokenPurpose: set-password or reset-password token
"""

from src.domain.enums.token_purpose import TokenPurpose
from src.domain.enums.user_role import UserRole

__all__ = [
    "TokenPurpose",
    "UserRole",
]
