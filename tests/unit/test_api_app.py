"""Unit tests for gitcoins.api.app application factory.

Usage
-----
Run with pytest::

    pytest tests/unit/test_api_app.py

"""

from __future__ import annotations

import falcon
import falcon.asgi
import falcon.testing
import pytest

from gitcoins.api.app import AppDependencies, create_app
from gitcoins.workflows import InMemoryWorkflowClient, WorkflowDispatcher

_WEBHOOK_PATHS = ("/api/git/create-key", "/api/git/push-event", "/api/git/pr-event")


@pytest.fixture
def deps() -> AppDependencies:
    """Build AppDependencies around the in-memory engine."""
    return AppDependencies(dispatcher=WorkflowDispatcher(InMemoryWorkflowClient()))


@pytest.fixture
def health_client() -> falcon.testing.TestClient:
    """Build a test client for health-only mode."""
    return falcon.testing.TestClient(create_app())


@pytest.fixture
def full_client(deps: AppDependencies) -> falcon.testing.TestClient:
    """Build a test client with webhook endpoints."""
    return falcon.testing.TestClient(create_app(deps))


class TestCreateAppHealthOnly:
    """Tests for create_app() without a dispatcher."""

    def test_returns_falcon_app(self) -> None:
        """create_app() returns a Falcon ASGI App."""
        assert isinstance(create_app(), falcon.asgi.App), "expected Falcon ASGI App"

    def test_has_health_route(self, health_client: falcon.testing.TestClient) -> None:
        """Health-only app responds to /health."""
        result = health_client.simulate_get("/health")
        assert result.status == falcon.HTTP_200, "expected HTTP 200 from /health"
        assert result.json == {"status": "ok"}, "wrong /health body"

    def test_has_ready_route(self, health_client: falcon.testing.TestClient) -> None:
        """Health-only app responds to /ready."""
        result = health_client.simulate_get("/ready")
        assert result.status == falcon.HTTP_200, "expected HTTP 200 from /ready"
        assert result.json == {"status": "ready"}, "wrong /ready body"

    @pytest.mark.parametrize("path", _WEBHOOK_PATHS)
    def test_webhooks_not_registered(
        self, health_client: falcon.testing.TestClient, path: str
    ) -> None:
        """Without a dispatcher, webhook endpoints return 404."""
        result = health_client.simulate_post(path, body="{}")
        assert result.status == falcon.HTTP_404, f"{path} should not be routed"

    def test_empty_dependencies_are_health_only(self) -> None:
        """AppDependencies without a dispatcher behaves like no dependencies."""
        client = falcon.testing.TestClient(create_app(AppDependencies()))
        result = client.simulate_post("/api/git/push-event", body="{}")
        assert result.status == falcon.HTTP_404


class TestCreateAppWithDispatcher:
    """Tests for create_app() with a dispatcher."""

    def test_has_health_route(self, full_client: falcon.testing.TestClient) -> None:
        """Full app still responds to /health."""
        result = full_client.simulate_get("/health")
        assert result.status == falcon.HTTP_200, "expected HTTP 200 from /health"

    @pytest.mark.parametrize("path", _WEBHOOK_PATHS)
    def test_webhooks_registered(
        self, full_client: falcon.testing.TestClient, path: str
    ) -> None:
        """With a dispatcher, webhook endpoints are routed."""
        result = full_client.simulate_post(path, body="{}")
        assert result.status == falcon.HTTP_400, f"{path} should reject an empty event"

    @pytest.mark.parametrize("path", _WEBHOOK_PATHS)
    def test_webhooks_only_accept_post(
        self, full_client: falcon.testing.TestClient, path: str
    ) -> None:
        """Webhook endpoints reject GET."""
        result = full_client.simulate_get(path)
        assert result.status == falcon.HTTP_405, f"{path} should only allow POST"
