"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from src.domain.entities.user import User
from src.domain.enums import TokenPurpose, UserRole
from src.infrastructure.persistence.models.user import User as UserModel


def _as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes returned by drivers without tz support."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def _token_column(purpose: TokenPurpose) -> InstrumentedAttribute[str | None]:
    if purpose is TokenPurpose.SET_PASSWORD:
        return UserModel.set_password_token
    return UserModel.reset_password_token


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_username_or_email("ana")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._find_one(stmt)

    async def find_by_token(self, purpose: TokenPurpose, token: str) -> User | None:
        """Find the user holding `token` for `purpose` (exact match).

        Args:
            purpose: Which token column to search.
            token: Token value presented by the caller.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(_token_column(purpose) == token)
        return await self._find_one(stmt)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (exact match)."""
        stmt = select(UserModel).where(UserModel.email == email)
        return await self._find_one(stmt)

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        """Find user whose username or email equals `identifier`.

        Returns the oldest match if the identifier is one user's username and
        another user's email.
        """
        stmt = (
            select(UserModel)
            .where(
                or_(UserModel.username == identifier, UserModel.email == identifier)
            )
            .order_by(UserModel.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalars().first()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def exists_by_username(
        self, username: str, exclude_id: UUID | None = None
    ) -> bool:
        """Check if user with username exists (optionally ignoring one ID)."""
        stmt = select(UserModel.id).where(UserModel.username == username)
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def exists_by_email(self, email: str, exclude_id: UUID | None = None) -> bool:
        """Check if user with email exists (optionally ignoring one ID)."""
        stmt = select(UserModel.id).where(UserModel.email == email)
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[User]:
        """Return every user ordered by username."""
        stmt = select(UserModel).order_by(UserModel.username)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If username or email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()
        await self.session.refresh(user_model)

    async def update(self, user: User) -> None:
        """Persist the profile fields of an existing user.

        Credential columns (password hash, token pairs, email verification)
        are left alone; they have dedicated writers below.
        """
        await self._write(user.id, self._profile_values(user))

    async def store_token(self, user: User, purpose: TokenPurpose) -> None:
        """Persist the token pair of one purpose plus updated_at."""
        await self._write(
            user.id,
            {**self._token_values(user, purpose), "updated_at": user.updated_at},
        )

    async def store_password(self, user: User) -> None:
        """Persist an administrative password change.

        Writes the password hash and the (cleared) invitation pair.
        """
        await self._write(
            user.id,
            {
                "password_hash": user.password_hash,
                **self._token_values(user, TokenPurpose.SET_PASSWORD),
                "updated_at": user.updated_at,
            },
        )

    async def update_if_token_matches(
        self,
        user: User,
        purpose: TokenPurpose,
        expected_token: str,
    ) -> bool:
        """Persist a token consumption (compare-and-swap on a token column).

        The UPDATE carries `token_column = expected_token` in its WHERE
        clause, so of two concurrent consumers only one sees rowcount 1.
        Only the columns a consumption changes are written.

        Returns:
            True if the row was written, False if the token had changed.
        """
        return await self._write_if_token_matches(
            user.id,
            purpose,
            expected_token,
            {
                "password_hash": user.password_hash,
                **self._token_values(user, purpose),
                "is_email_verified": user.is_email_verified,
                "updated_at": user.updated_at,
            },
        )

    async def clear_token_if_matches(
        self,
        user: User,
        purpose: TokenPurpose,
        expected_token: str,
    ) -> bool:
        """Drop an expired token pair unless it was replaced meanwhile."""
        return await self._write_if_token_matches(
            user.id,
            purpose,
            expected_token,
            {**self._token_values(user, purpose), "updated_at": user.updated_at},
        )

    async def delete(self, user_id: UUID) -> None:
        """Delete user (hard delete)."""
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.commit()

    async def _find_one(self, stmt: Any) -> User | None:
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def _write(self, user_id: UUID, values: dict[str, Any]) -> None:
        """Write `values` to one row.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        result = await self.session.execute(
            update(UserModel).where(UserModel.id == user_id).values(**values)
        )
        await self.session.commit()
        if result.rowcount != 1:
            raise NoResultFound(f"User {user_id} not found")

    async def _write_if_token_matches(
        self,
        user_id: UUID,
        purpose: TokenPurpose,
        expected_token: str,
        values: dict[str, Any],
    ) -> bool:
        stmt = (
            update(UserModel)
            .where(
                UserModel.id == user_id,
                _token_column(purpose) == expected_token,
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1

    @staticmethod
    def _profile_values(user: User) -> dict[str, Any]:
        return {
            "username": user.username,
            "email": user.email,
            "role": user.role.value,
            "company_id": user.company_id,
            "privacy_policy_accepted": user.privacy_policy_accepted,
            "updated_at": user.updated_at,
        }

    @staticmethod
    def _token_values(user: User, purpose: TokenPurpose) -> dict[str, Any]:
        if purpose is TokenPurpose.SET_PASSWORD:
            return {
                "set_password_token": user.set_password_token,
                "set_password_token_expires_at": user.set_password_token_expires_at,
            }
        return {
            "reset_password_token": user.reset_password_token,
            "reset_password_token_expires_at": user.reset_password_token_expires_at,
        }

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            role=UserRole(user_model.role),
            company_id=user_model.company_id,
            privacy_policy_accepted=user_model.privacy_policy_accepted,
            password_hash=user_model.password_hash,
            set_password_token=user_model.set_password_token,
            set_password_token_expires_at=_as_utc(
                user_model.set_password_token_expires_at
            ),
            reset_password_token=user_model.reset_password_token,
            reset_password_token_expires_at=_as_utc(
                user_model.reset_password_token_expires_at
            ),
            is_email_verified=user_model.is_email_verified,
            created_at=_as_utc(user_model.created_at),  # type: ignore[arg-type]
            updated_at=_as_utc(user_model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            created_at=user.created_at,
            password_hash=user.password_hash,
            is_email_verified=user.is_email_verified,
            **self._profile_values(user),
            **self._token_values(user, TokenPurpose.SET_PASSWORD),
            **self._token_values(user, TokenPurpose.RESET_PASSWORD),
        )
