"""API tests for user management endpoints.

Architecture:
- Real app with handlers replaced by stubs
- Verifies command construction, status codes and error bodies
"""

from uuid import uuid4

import pytest

from src.application.dtos import UserView
from src.application.errors.resource_errors import company_required, user_not_found
from src.core.container import (
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_reissue_set_password_token_handler,
    get_update_user_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.main import app
from tests.utils.doubles import make_company, make_user


class StubHandler:
    """Records the command and returns a canned result."""

    def __init__(self, result):
        self.result = result
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return self.result


def _use(factory, result):
    stub = StubHandler(result)
    app.dependency_overrides[factory] = lambda: stub
    return stub


@pytest.fixture
def company():
    return make_company("Acme")


@pytest.fixture
def view(company):
    return UserView.from_entity(make_user(company_id=company.id), company.name)


@pytest.mark.api
class TestCreateUser:
    def test_created(self, client, view, company):
        stub = _use(get_create_user_handler, Success(value=view))

        response = client.post(
            "/api/v1/users",
            json={
                "username": "ana",
                "email": "ana@example.com",
                "privacy_policy_accepted": True,
                "role": "Usuario",
                "company_id": str(company.id),
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["company_name"] == "Acme"
        assert body["is_email_verified"] is False
        assert "set_password_token" not in body
        command = stub.commands[0]
        assert command.role is UserRole.USUARIO
        assert command.company_id == company.id

    def test_company_required_is_400_with_field(self, client):
        _use(get_create_user_handler, Failure(error=company_required()))

        response = client.post(
            "/api/v1/users",
            json={
                "username": "ana",
                "email": "ana@example.com",
                "privacy_policy_accepted": True,
                "role": "Superusuario",
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["title"] == "Validation Failed"
        assert body["errors"][0]["field"] == "company_id"

    def test_duplicate_username_is_409(self, client):
        _use(
            get_create_user_handler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="Username is already taken",
                    resource_type="User",
                    conflicting_field="username",
                )
            ),
        )

        response = client.post(
            "/api/v1/users",
            json={
                "username": "ana",
                "email": "ana@example.com",
                "privacy_policy_accepted": True,
                "role": "Administrador",
            },
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/username_already_exists")

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ana", "email": "bad", "role": "Usuario"},
            {"username": "ana", "email": "ana@example.com", "role": "Root"},
            {"email": "ana@example.com", "role": "Usuario"},
        ],
    )
    def test_malformed_payload_is_422(self, client, payload):
        stub = _use(get_create_user_handler, None)

        response = client.post("/api/v1/users", json=payload)

        assert response.status_code == 422
        assert stub.commands == []


@pytest.mark.api
class TestReadUsers:
    def test_list(self, client, view):
        _use(get_list_users_handler, Success(value=[view]))

        response = client.get("/api/v1/users")

        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["ana"]

    def test_get(self, client, view):
        stub = _use(get_get_user_handler, Success(value=view))

        response = client.get(f"/api/v1/users/{view.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(view.id)
        assert stub.commands[0].user_id == view.id

    def test_get_unknown_is_404(self, client):
        user_id = uuid4()
        _use(get_get_user_handler, Failure(error=user_not_found(user_id)))

        response = client.get(f"/api/v1/users/{user_id}")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/user_not_found")

    def test_invalid_uuid_is_422(self, client):
        _use(get_get_user_handler, None)

        response = client.get("/api/v1/users/not-a-uuid")

        assert response.status_code == 422


@pytest.mark.api
class TestUpdateUser:
    def test_partial_update_is_204(self, client, view):
        stub = _use(get_update_user_handler, Success(value=view))

        response = client.put(
            f"/api/v1/users/{view.id}",
            json={"role": "Administrador", "remove_company": True},
        )

        assert response.status_code == 204
        assert response.content == b""
        command = stub.commands[0]
        assert command.role is UserRole.ADMINISTRADOR
        assert command.remove_company is True
        assert command.email is None

    def test_unknown_user_is_404(self, client):
        user_id = uuid4()
        _use(get_update_user_handler, Failure(error=user_not_found(user_id)))

        response = client.put(f"/api/v1/users/{user_id}", json={})

        assert response.status_code == 404


@pytest.mark.api
class TestDeleteUser:
    def test_deleted(self, client):
        _use(get_delete_user_handler, Success(value=None))

        response = client.delete(f"/api/v1/users/{uuid4()}")

        assert response.status_code == 204

    def test_unknown_is_404(self, client):
        user_id = uuid4()
        _use(get_delete_user_handler, Failure(error=user_not_found(user_id)))

        response = client.delete(f"/api/v1/users/{user_id}")

        assert response.status_code == 404


@pytest.mark.api
class TestResendInvitation:
    def test_accepted(self, client):
        user_id = uuid4()
        stub = _use(get_reissue_set_password_token_handler, Success(value=None))

        response = client.post(f"/api/v1/users/{user_id}/set-password-tokens")

        assert response.status_code == 202
        assert "message" in response.json()
        assert stub.commands[0].user_id == user_id

    def test_password_already_set_is_409(self, client):
        _use(
            get_reissue_set_password_token_handler,
            Failure(
                error=ConflictError(
                    code=ErrorCode.PASSWORD_ALREADY_SET,
                    message="The user has already set a password",
                    resource_type="User",
                )
            ),
        )

        response = client.post(f"/api/v1/users/{uuid4()}/set-password-tokens")

        assert response.status_code == 409
