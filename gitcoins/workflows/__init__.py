"""Workflow dispatch for validated webhook events.

This package maps event kinds onto backend workflows and normalises their
results. The `WorkflowClient` protocol is the only thing the dispatcher
knows about the engine; `HttpWorkflowClient` and `InMemoryWorkflowClient`
are the shipped implementations.

Public API
----------
WorkflowDispatcher
    Invoke the workflow for an event kind and return a WorkflowOutcome.
WorkflowClient
    Protocol for workflow engine clients.
HttpWorkflowClient
    Client for a remote engine reached over HTTP.
InMemoryWorkflowClient
    In-process engine for development and tests.
WorkflowEngineConfig
    Environment-driven client and dispatcher settings.
create_workflow_client
    Factory selecting a client from configuration.
WorkflowSuccess, WorkflowFailure, WorkflowOutcome
    Dispatch results.
WorkflowExecutionError, WorkflowConfigError
    Errors raised by clients and configuration.
"""

from __future__ import annotations

from gitcoins.workflows.config import WorkflowEngineConfig
from gitcoins.workflows.dispatcher import WorkflowDispatcher
from gitcoins.workflows.errors import WorkflowConfigError, WorkflowExecutionError
from gitcoins.workflows.factory import create_workflow_client
from gitcoins.workflows.http_client import HttpWorkflowClient
from gitcoins.workflows.memory import InMemoryWorkflowClient
from gitcoins.workflows.models import (
    WORKFLOW_FOR_EVENT,
    DispatchRequest,
    FailureReason,
    WorkflowFailure,
    WorkflowName,
    WorkflowOutcome,
    WorkflowSuccess,
)
from gitcoins.workflows.protocol import WorkflowClient

__all__ = [
    "WORKFLOW_FOR_EVENT",
    "DispatchRequest",
    "FailureReason",
    "HttpWorkflowClient",
    "InMemoryWorkflowClient",
    "WorkflowClient",
    "WorkflowConfigError",
    "WorkflowDispatcher",
    "WorkflowEngineConfig",
    "WorkflowExecutionError",
    "WorkflowFailure",
    "WorkflowName",
    "WorkflowOutcome",
    "WorkflowSuccess",
    "create_workflow_client",
]
