"""Unit tests for workflow engine configuration and client factory."""

from __future__ import annotations

import os
from unittest import mock

import pytest

from gitcoins.workflows import (
    HttpWorkflowClient,
    InMemoryWorkflowClient,
    WorkflowConfigError,
    WorkflowEngineConfig,
    create_workflow_client,
)


class TestWorkflowEngineConfigFromEnv:
    """Tests for WorkflowEngineConfig.from_env."""

    def test_raises_when_backend_missing(self) -> None:
        """The backend variable is required."""
        with (
            mock.patch.dict(os.environ, {}, clear=True),
            pytest.raises(WorkflowConfigError, match="GITCOINS_WORKFLOW_BACKEND"),
        ):
            WorkflowEngineConfig.from_env()

    def test_raises_on_invalid_backend(self) -> None:
        """Unknown backends are rejected with the valid options listed."""
        env = {"GITCOINS_WORKFLOW_BACKEND": "corda"}
        with (
            mock.patch.dict(os.environ, env, clear=True),
            pytest.raises(WorkflowConfigError, match="corda") as exc_info,
        ):
            WorkflowEngineConfig.from_env()
        message = str(exc_info.value)
        assert "'http'" in message, "valid options should be listed"
        assert "'memory'" in message, "valid options should be listed"

    @pytest.mark.parametrize("value", ["memory", "MEMORY", "  Memory  "])
    def test_backend_is_normalised(self, value: str) -> None:
        """Backend names are case and whitespace insensitive."""
        with mock.patch.dict(
            os.environ, {"GITCOINS_WORKFLOW_BACKEND": value}, clear=True
        ):
            config = WorkflowEngineConfig.from_env()
        assert config.backend == "memory"

    def test_defaults(self) -> None:
        """Timeouts default when unset."""
        with mock.patch.dict(
            os.environ, {"GITCOINS_WORKFLOW_BACKEND": "memory"}, clear=True
        ):
            config = WorkflowEngineConfig.from_env()
        assert config.engine_url is None
        assert config.request_timeout_s == pytest.approx(30.0)
        assert config.dispatch_timeout_s == pytest.approx(60.0)

    def test_http_requires_engine_url(self) -> None:
        """The http backend needs an engine URL."""
        with (
            mock.patch.dict(
                os.environ, {"GITCOINS_WORKFLOW_BACKEND": "http"}, clear=True
            ),
            pytest.raises(WorkflowConfigError, match="GITCOINS_WORKFLOW_ENGINE_URL"),
        ):
            WorkflowEngineConfig.from_env()

    def test_reads_http_settings(self) -> None:
        """Engine URL and timeouts are read from the environment."""
        env = {
            "GITCOINS_WORKFLOW_BACKEND": "http",
            "GITCOINS_WORKFLOW_ENGINE_URL": " https://engine.example.test ",
            "GITCOINS_WORKFLOW_REQUEST_TIMEOUT_S": "5",
            "GITCOINS_DISPATCH_TIMEOUT_S": "12.5",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = WorkflowEngineConfig.from_env()
        assert config.engine_url == "https://engine.example.test"
        assert config.request_timeout_s == pytest.approx(5.0)
        assert config.dispatch_timeout_s == pytest.approx(12.5)

    @pytest.mark.parametrize("value", ["0", "0.0", "none", "OFF"])
    def test_dispatch_timeout_can_be_disabled(self, value: str) -> None:
        """Zero or 'none'/'off' disables the dispatch bound."""
        env = {
            "GITCOINS_WORKFLOW_BACKEND": "memory",
            "GITCOINS_DISPATCH_TIMEOUT_S": value,
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = WorkflowEngineConfig.from_env()
        assert config.dispatch_timeout_s is None

    @pytest.mark.parametrize("value", ["soon", "-1", "nan", "inf", "-inf"])
    def test_rejects_malformed_timeout(self, value: str) -> None:
        """Non-numeric, non-finite or negative timeouts are rejected."""
        env = {
            "GITCOINS_WORKFLOW_BACKEND": "memory",
            "GITCOINS_DISPATCH_TIMEOUT_S": value,
        }
        with (
            mock.patch.dict(os.environ, env, clear=True),
            pytest.raises(WorkflowConfigError, match="GITCOINS_DISPATCH_TIMEOUT_S"),
        ):
            WorkflowEngineConfig.from_env()


class TestCreateWorkflowClient:
    """Tests for create_workflow_client."""

    def test_memory_backend(self) -> None:
        """The memory backend yields the in-process engine."""
        client = create_workflow_client(WorkflowEngineConfig(backend="memory"))
        assert isinstance(client, InMemoryWorkflowClient)

    def test_http_backend(self) -> None:
        """The http backend yields an HTTP client."""
        config = WorkflowEngineConfig(
            backend="http", engine_url="https://engine.example.test"
        )
        client = create_workflow_client(config)
        assert isinstance(client, HttpWorkflowClient)
