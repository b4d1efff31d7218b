"""Integration tests for BcryptPasswordService (real bcrypt)."""

import pytest

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.fixture(scope="module")
def service():
    return BcryptPasswordService(cost_factor=10)


@pytest.mark.integration
class TestBcryptPasswordService:
    def test_hash_and_verify(self, service):
        password_hash = service.hash_password("s3cretpass")

        assert password_hash.startswith("$2b$10$")
        assert len(password_hash) == 60
        assert service.verify_password("s3cretpass", password_hash)
        assert not service.verify_password("s3cretpasS", password_hash)

    def test_salted(self, service):
        assert service.hash_password("same-pass") != service.hash_password("same-pass")

    def test_long_passwords_differ_after_72_bytes(self, service):
        base = "x" * 72
        password_hash = service.hash_password(base + "a")

        assert service.verify_password(base + "a", password_hash)
        assert not service.verify_password(base + "b", password_hash)

    def test_malformed_hash_is_a_mismatch(self, service):
        assert service.verify_password("whatever", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("cost", [9, 21])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
