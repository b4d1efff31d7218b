"""CompanyRepository - SQLAlchemy implementation of CompanyRepository protocol."""

from datetime import UTC
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.company import Company
from src.infrastructure.persistence.models.company import Company as CompanyModel
from src.infrastructure.persistence.models.user import User as UserModel


class CompanyRepository:
    """SQLAlchemy implementation of CompanyRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID."""
        stmt = select(CompanyModel).where(CompanyModel.id == company_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_name(self, name: str) -> Company | None:
        """Find company by its unique name."""
        stmt = select(CompanyModel).where(CompanyModel.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def exists_by_id(self, company_id: UUID) -> bool:
        """Check whether a company exists."""
        stmt = select(CompanyModel.id).where(CompanyModel.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[Company]:
        """Return every company ordered by name."""
        stmt = select(CompanyModel).order_by(CompanyModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, company: Company) -> None:
        """Create new company.

        Raises:
            IntegrityError: If the name already exists.
        """
        model = CompanyModel(
            id=company.id,
            name=company.name,
            created_at=company.created_at,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)

    async def update(self, company: Company) -> None:
        """Persist changes to an existing company.

        Raises:
            NoResultFound: If company doesn't exist.
        """
        stmt = select(CompanyModel).where(CompanyModel.id == company.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()
        model.name = company.name
        await self.session.commit()

    async def delete(self, company_id: UUID) -> None:
        """Delete company after detaching its users.

        The foreign key also declares ON DELETE SET NULL; detaching here
        keeps the behaviour identical on backends that do not enforce it.
        """
        await self.session.execute(
            update(UserModel)
            .where(UserModel.company_id == company_id)
            .values(company_id=None)
        )
        await self.session.execute(
            delete(CompanyModel).where(CompanyModel.id == company_id)
        )
        await self.session.commit()

    def _to_domain(self, model: CompanyModel) -> Company:
        """Convert database model to domain entity."""
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        return Company(id=model.id, name=model.name, created_at=created_at)
