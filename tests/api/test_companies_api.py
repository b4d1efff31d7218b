"""API tests for company endpoints."""

from uuid import uuid4

import pytest

from src.application.commands.handlers.create_company_handler import (
    company_name_taken,
)
from src.application.dtos import CompanyView
from src.application.errors.resource_errors import company_not_found
from src.core.container import (
    get_create_company_handler,
    get_delete_company_handler,
    get_get_company_handler,
    get_list_companies_handler,
    get_update_company_handler,
)
from src.core.result import Failure, Success
from src.main import app
from tests.utils.doubles import make_company


class StubHandler:
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
def view():
    return CompanyView.from_entity(make_company("Acme"))


@pytest.mark.api
class TestCompaniesEndpoints:
    def test_create(self, client, view):
        stub = _use(get_create_company_handler, Success(value=view))

        response = client.post("/api/v1/companies", json={"name": "Acme"})

        assert response.status_code == 201
        assert response.json()["name"] == "Acme"
        assert stub.commands[0].name == "Acme"

    def test_create_duplicate_is_409(self, client):
        _use(get_create_company_handler, Failure(error=company_name_taken()))

        response = client.post("/api/v1/companies", json={"name": "Acme"})

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/company_name_already_exists")

    def test_blank_name_is_422(self, client):
        _use(get_create_company_handler, None)

        response = client.post("/api/v1/companies", json={"name": ""})

        assert response.status_code == 422

    def test_list(self, client, view):
        _use(get_list_companies_handler, Success(value=[view]))

        response = client.get("/api/v1/companies")

        assert response.status_code == 200
        assert response.json()[0]["id"] == str(view.id)

    def test_get_unknown_is_404(self, client):
        company_id = uuid4()
        _use(get_get_company_handler, Failure(error=company_not_found(company_id)))

        response = client.get(f"/api/v1/companies/{company_id}")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/company_not_found")

    def test_rename_is_204(self, client, view):
        stub = _use(get_update_company_handler, Success(value=view))

        response = client.put(
            f"/api/v1/companies/{view.id}", json={"name": "Acme Ltda."}
        )

        assert response.status_code == 204
        assert stub.commands[0].company_id == view.id
        assert stub.commands[0].name == "Acme Ltda."

    def test_delete_is_204(self, client):
        _use(get_delete_company_handler, Success(value=None))

        response = client.delete(f"/api/v1/companies/{uuid4()}")

        assert response.status_code == 204
