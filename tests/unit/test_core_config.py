"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Defaults for the credential lifecycle
- Validation (bcrypt_rounds, token lifetimes, URLs)
- CORS parsing and environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.enums import Environment


def _load(**env: str) -> Settings:
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


@pytest.mark.unit
class TestSettingsDefaults:
    """Default values."""

    def test_token_lifetimes(self):
        settings = _load()

        assert settings.set_password_token_expire_hours == 24
        assert settings.reset_password_token_expire_hours == 1

    def test_development_by_default(self):
        settings = _load()

        assert settings.environment is Environment.DEVELOPMENT
        assert settings.is_development
        assert not settings.is_production


@pytest.mark.unit
class TestSettingsValidation:
    """Field validation."""

    @pytest.mark.parametrize("rounds", ["9", "21"])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError):
            _load(BCRYPT_ROUNDS=rounds)

    def test_bcrypt_rounds_valid(self):
        assert _load(BCRYPT_ROUNDS="10").bcrypt_rounds == 10

    @pytest.mark.parametrize(
        "name", ["SET_PASSWORD_TOKEN_EXPIRE_HOURS", "RESET_PASSWORD_TOKEN_EXPIRE_HOURS"]
    )
    def test_token_lifetime_must_be_positive(self, name):
        with pytest.raises(ValidationError):
            _load(**{name: "0"})

    def test_trailing_slashes_removed(self):
        settings = _load(
            FRONTEND_URL="https://app.example.com/",
            SET_PASSWORD_URL_BASE="https://api.example.com/api/v1/users/",
        )

        assert settings.frontend_url == "https://app.example.com"
        assert settings.set_password_url_base == "https://api.example.com/api/v1/users"

    def test_cors_origin_list(self):
        settings = _load(CORS_ORIGINS="https://a.example.com, https://b.example.com")

        assert settings.cors_origin_list == [
            "https://a.example.com",
            "https://b.example.com",
        ]

    def test_environment_from_env(self):
        settings = _load(ENVIRONMENT="ci")

        assert settings.is_ci
        assert not settings.is_testing


@pytest.mark.unit
class TestGetSettings:
    def test_is_cached(self):
        assert get_settings() is get_settings()
