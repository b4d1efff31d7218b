"""Unit tests for the token generator and session token issuer."""

import re

import pytest

from src.core.constants import mask_token
from src.infrastructure.security.placeholder_session_token_issuer import (
    PlaceholderSessionTokenIssuer,
)
from src.infrastructure.security.secure_token_generator import SecureTokenGenerator
from tests.utils.doubles import make_user

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


@pytest.mark.unit
class TestSecureTokenGenerator:
    def test_default_token_is_url_safe(self):
        token = SecureTokenGenerator().generate()

        assert len(token) == 43
        assert URL_SAFE.match(token)

    def test_tokens_are_unique(self):
        generator = SecureTokenGenerator()

        tokens = {generator.generate() for _ in range(200)}

        assert len(tokens) == 200

    def test_length_must_be_positive(self):
        with pytest.raises(ValueError):
            SecureTokenGenerator().generate(0)


@pytest.mark.unit
class TestMaskToken:
    def test_long_token_is_truncated(self):
        assert mask_token("abcdefghijkl") == "abcdefgh..."

    def test_short_token_is_kept(self):
        assert mask_token("abc") == "abc"


@pytest.mark.unit
class TestPlaceholderSessionTokenIssuer:
    def test_token_names_user(self):
        user = make_user()

        token = PlaceholderSessionTokenIssuer().issue(user)

        assert token.startswith(f"session_{user.id.hex}_")

    def test_tokens_differ_per_login(self):
        user = make_user()
        issuer = PlaceholderSessionTokenIssuer()

        assert issuer.issue(user) != issuer.issue(user)
