"""Factory for creating WorkflowClient implementations from configuration."""

from __future__ import annotations

import typing as typ

from gitcoins.workflows.memory import InMemoryWorkflowClient

if typ.TYPE_CHECKING:
    from gitcoins.workflows.config import WorkflowEngineConfig
    from gitcoins.workflows.protocol import WorkflowClient


def create_workflow_client(config: WorkflowEngineConfig) -> WorkflowClient:
    """Create the workflow client selected by ``config.backend``.

    Parameters
    ----------
    config
        Engine configuration, usually from ``WorkflowEngineConfig.from_env()``.

    Returns
    -------
    WorkflowClient
        ``InMemoryWorkflowClient`` for ``memory``; ``HttpWorkflowClient``
        for ``http``.

    Raises
    ------
    WorkflowConfigError
        If the ``http`` backend is selected without an engine URL.

    """
    if config.backend == "memory":
        return InMemoryWorkflowClient()

    from gitcoins.workflows.http_client import HttpWorkflowClient

    return HttpWorkflowClient(config)
