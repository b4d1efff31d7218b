"""Integration tests for UserRepository and CompanyRepository (SQLite).

Each step opens a fresh session so reads observe committed state only.
"""

from datetime import timedelta

import pytest

from src.domain.enums import TokenPurpose, UserRole
from src.infrastructure.persistence.repositories import (
    CompanyRepository,
    UserRepository,
)
from tests.utils.doubles import T0, make_company, make_user


async def _save_company(database, name="Acme"):
    company = make_company(name)
    async with database.get_session() as session:
        await CompanyRepository(session).save(company)
    return company


async def _save_user(database, **kwargs):
    user = make_user(**kwargs)
    async with database.get_session() as session:
        await UserRepository(session).save(user)
    return user


async def _find(database, user_id):
    async with database.get_session() as session:
        return await UserRepository(session).find_by_id(user_id)


@pytest.mark.integration
class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, database):
        company = await _save_company(database)
        user = await _save_user(database, company_id=company.id)

        async with database.get_session() as session:
            found = await UserRepository(session).find_by_id(user.id)

        assert found == user
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_username_or_email(self, database):
        user = await _save_user(database, role=UserRole.ADMINISTRADOR)

        async with database.get_session() as session:
            repo = UserRepository(session)
            by_name = await repo.find_by_username_or_email("ana")
            by_email = await repo.find_by_username_or_email("ana@example.com")
            missing = await repo.find_by_username_or_email("nobody")

        assert by_name.id == by_email.id == user.id
        assert missing is None

    @pytest.mark.asyncio
    async def test_identifier_matching_two_users_returns_oldest(self, database):
        older = await _save_user(
            database,
            username="bob@example.com",
            email="bob.old@example.com",
            role=UserRole.ADMINISTRADOR,
        )
        await _save_user(
            database,
            username="bob",
            email="bob@example.com",
            role=UserRole.ADMINISTRADOR,
            now=T0 + timedelta(minutes=5),
        )

        async with database.get_session() as session:
            found = await UserRepository(session).find_by_username_or_email(
                "bob@example.com"
            )

        assert found.id == older.id

    @pytest.mark.asyncio
    async def test_exists_checks(self, database):
        user = await _save_user(database, role=UserRole.ADMINISTRADOR)

        async with database.get_session() as session:
            repo = UserRepository(session)
            assert await repo.exists_by_username("ana")
            assert await repo.exists_by_email("ana@example.com")
            assert not await repo.exists_by_email("ana@example.com", exclude_id=user.id)
            assert not await repo.exists_by_username("bob")

    @pytest.mark.asyncio
    async def test_find_by_token_per_purpose(self, database):
        user = make_user(role=UserRole.ADMINISTRADOR)
        user.issue_token(
            TokenPurpose.SET_PASSWORD, "set-tok", T0 + timedelta(hours=24), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)

        async with database.get_session() as session:
            repo = UserRepository(session)
            found = await repo.find_by_token(TokenPurpose.SET_PASSWORD, "set-tok")
            wrong_purpose = await repo.find_by_token(
                TokenPurpose.RESET_PASSWORD, "set-tok"
            )

        assert found.id == user.id
        assert found.set_password_token_expires_at == T0 + timedelta(hours=24)
        assert wrong_purpose is None

    @pytest.mark.asyncio
    async def test_update_if_token_matches_is_compare_and_swap(self, database):
        user = make_user(role=UserRole.ADMINISTRADOR)
        user.issue_token(
            TokenPurpose.SET_PASSWORD, "tok", T0 + timedelta(hours=24), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)

        first = make_user(id=user.id, role=UserRole.ADMINISTRADOR)
        first.establish_password("hash-1", TokenPurpose.SET_PASSWORD, T0)
        second = make_user(id=user.id, role=UserRole.ADMINISTRADOR)
        second.establish_password("hash-2", TokenPurpose.SET_PASSWORD, T0)

        async with database.get_session() as session:
            won = await UserRepository(session).update_if_token_matches(
                first, TokenPurpose.SET_PASSWORD, "tok"
            )
        async with database.get_session() as session:
            lost = await UserRepository(session).update_if_token_matches(
                second, TokenPurpose.SET_PASSWORD, "tok"
            )
        async with database.get_session() as session:
            stored = await UserRepository(session).find_by_id(user.id)

        assert (won, lost) == (True, False)
        assert stored.password_hash == "hash-1"
        assert stored.set_password_token is None

    @pytest.mark.asyncio
    async def test_store_token_writes_only_that_pair(self, database):
        user = make_user(role=UserRole.ADMINISTRADOR)
        user.issue_token(
            TokenPurpose.SET_PASSWORD, "set-tok", T0 + timedelta(hours=24), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)

        stale = make_user(id=user.id, role=UserRole.ADMINISTRADOR, email="stale@x.io")
        stale.issue_token(
            TokenPurpose.RESET_PASSWORD, "reset-tok", T0 + timedelta(hours=1), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).store_token(
                stale, TokenPurpose.RESET_PASSWORD
            )
        stored = await _find(database, user.id)

        assert stored.reset_password_token == "reset-tok"
        assert stored.set_password_token == "set-tok"
        assert stored.email == "ana@example.com"

    @pytest.mark.asyncio
    async def test_update_leaves_credentials_alone(self, database):
        user = await _save_user(database, role=UserRole.ADMINISTRADOR)

        stale = make_user(
            id=user.id,
            role=UserRole.ADMINISTRADOR,
            email="new@x.io",
            password_hash="digest",
        )
        stale.issue_token(
            TokenPurpose.SET_PASSWORD, "old", T0 + timedelta(hours=1), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).update(stale)
        stored = await _find(database, user.id)

        assert stored.email == "new@x.io"
        assert stored.set_password_token is None
        assert stored.password_hash is None

    @pytest.mark.asyncio
    async def test_store_password_keeps_reset_token(self, database):
        user = make_user(role=UserRole.ADMINISTRADOR)
        user.issue_token(
            TokenPurpose.RESET_PASSWORD, "reset-tok", T0 + timedelta(hours=1), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)

        stale = make_user(id=user.id, role=UserRole.ADMINISTRADOR)
        stale.force_password("forced", T0)
        async with database.get_session() as session:
            await UserRepository(session).store_password(stale)
        stored = await _find(database, user.id)

        assert stored.password_hash == "forced"
        assert stored.reset_password_token == "reset-tok"

    @pytest.mark.asyncio
    async def test_clear_token_if_matches_ignores_replaced_token(self, database):
        user = make_user(role=UserRole.ADMINISTRADOR, password_hash="digest")
        user.issue_token(
            TokenPurpose.RESET_PASSWORD, "newer", T0 + timedelta(hours=1), T0
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)

        user.clear_token(TokenPurpose.RESET_PASSWORD, T0)
        async with database.get_session() as session:
            cleared = await UserRepository(session).clear_token_if_matches(
                user, TokenPurpose.RESET_PASSWORD, "older"
            )
        stored = await _find(database, user.id)

        assert cleared is False
        assert stored.reset_password_token == "newer"
        assert stored.password_hash == "digest"

    @pytest.mark.asyncio
    async def test_list_ordered_by_username_and_delete(self, database):
        await _save_user(
            database,
            username="zoe",
            email="zoe@example.com",
            role=UserRole.ADMINISTRADOR,
        )
        ana = await _save_user(database, role=UserRole.ADMINISTRADOR)

        async with database.get_session() as session:
            names = [u.username for u in await UserRepository(session).list_all()]
        async with database.get_session() as session:
            await UserRepository(session).delete(ana.id)
        async with database.get_session() as session:
            remaining = await UserRepository(session).list_all()

        assert names == ["ana", "zoe"]
        assert [u.username for u in remaining] == ["zoe"]


@pytest.mark.integration
class TestCompanyRepository:
    @pytest.mark.asyncio
    async def test_save_find_and_rename(self, database):
        company = await _save_company(database)

        company.rename("Acme Ltda.")
        async with database.get_session() as session:
            await CompanyRepository(session).update(company)
        async with database.get_session() as session:
            repo = CompanyRepository(session)
            by_id = await repo.find_by_id(company.id)
            by_old_name = await repo.find_by_name("Acme")

        assert by_id.name == "Acme Ltda."
        assert by_old_name is None

    @pytest.mark.asyncio
    async def test_delete_detaches_users(self, database):
        company = await _save_company(database)
        user = await _save_user(database, company_id=company.id)

        async with database.get_session() as session:
            await CompanyRepository(session).delete(company.id)
        async with database.get_session() as session:
            exists = await CompanyRepository(session).exists_by_id(company.id)
            stored = await UserRepository(session).find_by_id(user.id)

        assert not exists
        assert stored is not None
        assert stored.company_id is None

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_name(self, database):
        await _save_company(database, "Globex")
        await _save_company(database, "Acme")

        async with database.get_session() as session:
            names = [c.name for c in await CompanyRepository(session).list_all()]

        assert names == ["Acme", "Globex"]
