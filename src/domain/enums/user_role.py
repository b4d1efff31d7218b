"""User roles for the administration backend.

Role values are stored and exchanged verbatim (Spanish labels used by the
existing frontend).

Role Rules:
    - Usuario: regular user, must belong to a company
    - Superusuario: company-level power user, must belong to a company
    - Administrador: platform administrator, company optional; the only
      role allowed to manage companies

Usage:
    from src.domain.enums import UserRole

    if role.requires_company and company_id is None:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str for easy serialization and storage.
    """

    USUARIO = "Usuario"
    """Regular user bound to one company."""

    SUPERUSUARIO = "Superusuario"
    """Company power user bound to one company."""

    ADMINISTRADOR = "Administrador"
    """Platform administrator (company association optional)."""

    @property
    def requires_company(self) -> bool:
        """Whether users with this role must be associated with a company.

        Returns:
            bool: True for Usuario and Superusuario.
        """
        return self in (UserRole.USUARIO, UserRole.SUPERUSUARIO)

    @property
    def can_manage_companies(self) -> bool:
        """Whether this role may manage companies."""
        return self is UserRole.ADMINISTRADOR

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['Usuario', 'Superusuario', 'Administrador'].
        """
        return [role.value for role in cls]
