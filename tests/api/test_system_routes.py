"""API tests for system endpoints and cross-cutting HTTP behavior."""

import pytest

from src.core.config import settings
from src.presentation.api.middleware.trace_middleware import get_trace_id


class StubDatabase:
    def __init__(self, healthy):
        self.healthy = healthy

    async def check_connection(self):
        return self.healthy


@pytest.mark.api
class TestSystemRoutes:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    @pytest.mark.parametrize(
        ("healthy", "status_code", "state"),
        [(True, 200, "healthy"), (False, 503, "unhealthy")],
    )
    def test_health(self, client, monkeypatch, healthy, status_code, state):
        monkeypatch.setattr(
            "src.presentation.routers.system.get_database",
            lambda: StubDatabase(healthy),
        )

        response = client.get("/health")

        assert response.status_code == status_code
        assert response.json()["status"] == state


@pytest.mark.api
class TestTraceHeader:
    def test_generated_when_absent(self, client):
        response = client.get("/")

        assert response.headers["X-Trace-Id"]

    def test_propagated_from_request(self, client):
        response = client.get("/", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"

    def test_no_trace_id_outside_a_request(self):
        assert get_trace_id() is None

    def test_unknown_route_is_problem_details(self, client):
        response = client.get("/api/v1/nothing-here", headers={"X-Trace-Id": "t-9"})

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Resource Not Found"
        assert body["trace_id"] == "t-9"
