"""Company domain entity.

Companies group Usuario and Superusuario accounts. Deleting a company keeps
its users and detaches them (company_id becomes None).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass
class Company:
    """Company domain entity.

    Attributes:
        id: Unique company identifier (UUIDv7)
        name: Unique display name
        created_at: Timestamp when company was created
    """

    id: UUID
    name: str
    created_at: datetime

    @classmethod
    def create(cls, *, name: str, now: datetime) -> "Company":
        """Build a new company."""
        return cls(id=uuid7(), name=name, created_at=now)

    def rename(self, name: str) -> bool:
        """Change the display name.

        Returns:
            bool: True if the name actually changed.
        """
        if name == self.name:
            return False
        self.name = name
        return True
