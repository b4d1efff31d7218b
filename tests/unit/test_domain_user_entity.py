"""Unit tests for the User and Company entities and the role rules."""

from datetime import timedelta

import pytest

from src.domain.entities.user import User
from src.domain.enums import TokenPurpose, UserRole
from tests.utils.doubles import T0, make_company, make_user


@pytest.mark.unit
class TestUserRole:
    def test_company_bound_roles(self):
        assert UserRole.USUARIO.requires_company
        assert UserRole.SUPERUSUARIO.requires_company
        assert not UserRole.ADMINISTRADOR.requires_company

    def test_only_administrators_manage_companies(self):
        assert UserRole.ADMINISTRADOR.can_manage_companies
        assert not UserRole.SUPERUSUARIO.can_manage_companies
        assert not UserRole.USUARIO.can_manage_companies

    def test_values_are_the_stored_strings(self):
        assert UserRole.values() == ["Usuario", "Superusuario", "Administrador"]

    @pytest.mark.parametrize(
        ("role", "has_company", "expected"),
        [
            (UserRole.USUARIO, False, False),
            (UserRole.SUPERUSUARIO, False, False),
            (UserRole.ADMINISTRADOR, False, True),
            (UserRole.USUARIO, True, True),
        ],
    )
    def test_company_requirement(self, role, has_company, expected):
        company_id = make_company().id if has_company else None
        assert User.company_requirement_met(role, company_id) is expected


@pytest.mark.unit
class TestUserCreation:
    def test_new_user_has_no_password_and_no_tokens(self):
        user = make_user()

        assert user.password_hash is None
        assert not user.has_password
        assert user.set_password_token is None
        assert user.set_password_token_expires_at is None
        assert user.reset_password_token is None
        assert user.reset_password_token_expires_at is None
        assert user.is_email_verified is False
        assert user.created_at == user.updated_at == T0

    def test_ids_are_unique(self):
        assert make_user().id != make_user().id


@pytest.mark.unit
class TestUserTokens:
    def test_issue_token_sets_both_fields(self):
        user = make_user()
        later = T0 + timedelta(minutes=5)

        user.issue_token(
            TokenPurpose.SET_PASSWORD, "tok-1", later + timedelta(hours=24), later
        )

        assert user.token_for(TokenPurpose.SET_PASSWORD) == "tok-1"
        assert user.token_expiry_for(TokenPurpose.SET_PASSWORD) == later + timedelta(
            hours=24
        )
        assert user.token_for(TokenPurpose.RESET_PASSWORD) is None
        assert user.updated_at == later

    def test_reissue_replaces_previous_token(self):
        user = make_user()
        user.issue_token(TokenPurpose.RESET_PASSWORD, "old", T0 + timedelta(hours=1), T0)
        user.issue_token(TokenPurpose.RESET_PASSWORD, "new", T0 + timedelta(hours=2), T0)

        assert user.reset_password_token == "new"
        assert user.reset_password_token_expires_at == T0 + timedelta(hours=2)

    def test_token_valid_up_to_and_including_expiry(self):
        user = make_user()
        expires_at = T0 + timedelta(hours=1)
        user.issue_token(TokenPurpose.RESET_PASSWORD, "tok", expires_at, T0)

        assert not user.is_token_expired(TokenPurpose.RESET_PASSWORD, expires_at)
        assert user.is_token_expired(
            TokenPurpose.RESET_PASSWORD, expires_at + timedelta(microseconds=1)
        )

    def test_missing_expiry_counts_as_expired(self):
        user = make_user(set_password_token="tok")

        assert user.is_token_expired(TokenPurpose.SET_PASSWORD, T0)

    def test_clear_token_drops_the_pair(self):
        user = make_user()
        user.issue_token(TokenPurpose.SET_PASSWORD, "tok", T0 + timedelta(hours=24), T0)

        user.clear_token(TokenPurpose.SET_PASSWORD, T0 + timedelta(hours=25))

        assert user.set_password_token is None
        assert user.set_password_token_expires_at is None


@pytest.mark.unit
class TestUserPasswords:
    def test_establish_via_invitation_verifies_email(self):
        user = make_user()
        user.issue_token(TokenPurpose.SET_PASSWORD, "tok", T0 + timedelta(hours=24), T0)

        user.establish_password("hash", TokenPurpose.SET_PASSWORD, T0)

        assert user.password_hash == "hash"
        assert user.set_password_token is None
        assert user.set_password_token_expires_at is None
        assert user.is_email_verified is True

    def test_establish_via_reset_keeps_verification_flag(self):
        user = make_user(password_hash="old")
        user.issue_token(TokenPurpose.RESET_PASSWORD, "tok", T0 + timedelta(hours=1), T0)

        user.establish_password("new", TokenPurpose.RESET_PASSWORD, T0)

        assert user.password_hash == "new"
        assert user.reset_password_token is None
        assert user.is_email_verified is False

    def test_force_password_drops_pending_invitation(self):
        user = make_user()
        user.issue_token(TokenPurpose.SET_PASSWORD, "tok", T0 + timedelta(hours=24), T0)
        user.issue_token(TokenPurpose.RESET_PASSWORD, "r", T0 + timedelta(hours=1), T0)

        user.force_password("hash", T0 + timedelta(minutes=1))

        assert user.has_password
        assert user.set_password_token is None
        assert user.reset_password_token == "r"


@pytest.mark.unit
class TestCompany:
    def test_rename_reports_change(self):
        company = make_company("Acme")

        assert company.rename("Acme") is False
        assert company.rename("Globex") is True
        assert company.name == "Globex"
