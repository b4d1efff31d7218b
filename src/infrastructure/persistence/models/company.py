"""Company database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.core.constants import COMPANY_NAME_MAX_LENGTH
from src.infrastructure.persistence.base import BaseMutableModel


class Company(BaseMutableModel):
    """Company model.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Unique display name

    Indexes:
        - ix_companies_name: (name) unique
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(
        String(COMPANY_NAME_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Company display name (unique)",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Company(id={self.id}, name={self.name!r})>"
