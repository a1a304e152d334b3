"""HTTP implementation of the WorkflowClient protocol."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from gitcoins.logging import get_logger, log_error
from gitcoins.workflows.errors import WorkflowConfigError, WorkflowExecutionError

if typ.TYPE_CHECKING:
    from gitcoins.workflows.config import WorkflowEngineConfig
    from gitcoins.workflows.models import WorkflowName

__all__ = ["HttpWorkflowClient", "WorkflowErrorBody", "WorkflowInvocation"]

logger = get_logger(__name__)


class WorkflowInvocation(msgspec.Struct, kw_only=True):
    """Request body sent to the workflow engine."""

    identity: str


class WorkflowErrorBody(msgspec.Struct, kw_only=True):
    """Error body returned by the workflow engine on failure."""

    message: str | None = None


def _error_message(response: httpx.Response) -> str | None:
    """Return the engine's ``message`` field, or None if absent or unreadable."""
    try:
        body = msgspec.json.decode(response.content, type=WorkflowErrorBody)
    except msgspec.DecodeError:
        return None
    return body.message


class HttpWorkflowClient:
    """Invoke workflows on a remote engine over HTTP.

    Each workflow is started with ``POST {engine_url}/workflows/{name}`` and
    the engine responds once the workflow has settled. Only a 2xx status
    means success. Redirects are not followed and count as failures like
    error statuses, which carry an optional JSON ``message``.

    Parameters
    ----------
    config
        Engine configuration; ``engine_url`` must be set.
    http_client
        Optional ``httpx.AsyncClient`` for testing. When omitted the
        instance creates and owns its own client.

    """

    def __init__(
        self,
        config: WorkflowEngineConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client from engine configuration."""
        if config.engine_url is None:
            raise WorkflowConfigError.missing_engine_url()
        self._base_url = config.engine_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.request_timeout_s,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def _workflow_url(self, workflow: WorkflowName) -> str:
        return f"{self._base_url}/workflows/{workflow}"

    async def invoke(self, workflow: WorkflowName, identity: str) -> None:
        """Run *workflow* for *identity* on the remote engine.

        Raises
        ------
        WorkflowExecutionError
            If the engine answers with a non-2xx status or cannot be
            reached. Transport failures carry no message so the caller's
            default applies.

        """
        payload = msgspec.json.encode(WorkflowInvocation(identity=identity))
        try:
            response = await self._client.post(
                self._workflow_url(workflow),
                content=payload,
            )
        except httpx.RequestError as exc:
            log_error(
                logger,
                "Workflow engine unreachable for %s (%s): %s",
                workflow,
                identity,
                exc,
            )
            raise WorkflowExecutionError.unreachable() from exc

        if not response.is_success:
            raise WorkflowExecutionError(
                _error_message(response),
                status_code=response.status_code,
            )
