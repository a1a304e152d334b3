"""Unit tests for the gitcoins.runtime module."""

from __future__ import annotations

import os
from http import HTTPStatus
from unittest import mock

import falcon.asgi
import falcon.testing
import pytest

from gitcoins.runtime import _parse_port, create_app
from gitcoins.workflows import WorkflowConfigError


def _client(env: dict[str, str]) -> falcon.testing.TestClient:
    with mock.patch.dict(os.environ, env, clear=True):
        return falcon.testing.TestClient(create_app())


class TestCreateApp:
    """Tests for the runtime create_app factory."""

    def test_returns_falcon_app(self) -> None:
        """create_app returns a Falcon ASGI App instance."""
        with mock.patch.dict(os.environ, {}, clear=True):
            app = create_app()
        assert isinstance(app, falcon.asgi.App)

    def test_health_only_without_backend(self) -> None:
        """Without a workflow backend only health checks are served."""
        client = _client({})
        assert client.simulate_get("/health").json == {"status": "ok"}
        assert client.simulate_get("/ready").json == {"status": "ready"}
        result = client.simulate_post("/api/git/push-event", body="{}")
        assert result.status_code == HTTPStatus.NOT_FOUND

    def test_memory_backend_serves_webhooks(self) -> None:
        """The memory backend enables the webhook endpoints."""
        client = _client({"GITCOINS_WORKFLOW_BACKEND": "memory"})
        result = client.simulate_post(
            "/api/git/create-key",
            body='{"comment":{"body":"createKey","user":{"login":"carol"}}}',
        )
        assert result.status_code == HTTPStatus.CREATED
        assert result.text == "New public key generated for GitHub user: carol"

    def test_invalid_backend_fails_fast(self) -> None:
        """Misconfiguration is reported at startup."""
        with (
            mock.patch.dict(
                os.environ, {"GITCOINS_WORKFLOW_BACKEND": "ledger"}, clear=True
            ),
            pytest.raises(WorkflowConfigError),
        ):
            create_app()


class TestParsePort:
    """Tests for port validation."""

    def test_valid_port(self) -> None:
        """A port within range is returned as an int."""
        assert _parse_port("8080") == 8080

    @pytest.mark.parametrize("value", ["0", "65536", "http"])
    def test_invalid_port_exits(self, value: str) -> None:
        """Out-of-range or non-numeric ports exit the process."""
        with pytest.raises(SystemExit):
            _parse_port(value)
