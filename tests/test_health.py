"""Health endpoint tests."""

import pytest
from falcon.testing import TestClient

from accessgate import __version__
from accessgate.domain.value_objects import AccessFieldConfig
from accessgate.interfaces.api.app import create_app
from accessgate.interfaces.api.middleware.ability import AbilityMiddleware
from accessgate.interfaces.api.middleware.auth import AuthMiddleware

from fakes import CountingPermissionsBackend


def _client(checks=None) -> TestClient:
    app = create_app(
        middleware=[
            AuthMiddleware(),
            AbilityMiddleware(CountingPermissionsBackend(), AccessFieldConfig.default()),
        ],
        readiness_checks=checks,
    )
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client()


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"
    assert result.json["version"] == __version__


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_not_ready_when_check_fails() -> None:
    """GET /v1/health/ready returns 503 if a dependency is down."""

    async def database() -> bool:
        return False

    result = _client({"database": database}).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["checks"] == {"database": False}
