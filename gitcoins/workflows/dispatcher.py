"""Dispatch validated webhook events to their backend workflows.

The dispatcher owns the seam between a validated ``(kind, identity)``
pair and the workflow engine: it picks the workflow, awaits it, and
normalises whatever happens into a :data:`WorkflowOutcome`. It never
retries; webhook senders redeliver on their own schedule.

Usage
-----
>>> import asyncio
>>> from gitcoins.events import EventKind
>>> from gitcoins.workflows import InMemoryWorkflowClient, WorkflowDispatcher
>>> dispatcher = WorkflowDispatcher(InMemoryWorkflowClient(), timeout_s=30)
>>> asyncio.run(dispatcher.dispatch(EventKind.KEY_REQUEST, "octocat"))
WorkflowSuccess(message='New public key generated for GitHub user: octocat')

"""

from __future__ import annotations

import asyncio
import typing as typ

from gitcoins.logging import get_logger, log_error, log_info
from gitcoins.workflows.errors import WorkflowExecutionError
from gitcoins.workflows.messages import (
    resolve_failure_message,
    success_message,
    timeout_message,
)
from gitcoins.workflows.models import (
    DispatchRequest,
    FailureReason,
    WorkflowFailure,
    WorkflowSuccess,
)

if typ.TYPE_CHECKING:
    from gitcoins.events.models import EventKind
    from gitcoins.workflows.models import WorkflowOutcome
    from gitcoins.workflows.protocol import WorkflowClient

__all__ = ["WorkflowDispatcher"]

logger = get_logger(__name__)


class WorkflowDispatcher:
    """Invoke the workflow matching an event kind and report the outcome.

    Parameters
    ----------
    client
        Shared workflow client used by every request.
    timeout_s
        Upper bound on the wait for a workflow to settle. ``None`` waits
        indefinitely.

    """

    def __init__(
        self,
        client: WorkflowClient,
        *,
        timeout_s: float | None = None,
    ) -> None:
        """Store the shared client and optional wait bound."""
        if timeout_s is not None and timeout_s <= 0:
            msg = f"timeout_s must be positive or None, got: {timeout_s}"
            raise ValueError(msg)
        self._client = client
        self._timeout_s = timeout_s

    @property
    def timeout_s(self) -> float | None:
        """Return the configured wait bound in seconds."""
        return self._timeout_s

    async def dispatch(self, kind: EventKind, identity: str) -> WorkflowOutcome:
        """Run the workflow for *kind* on behalf of *identity*.

        Parameters
        ----------
        kind
            Event kind that selects the backend workflow.
        identity
            GitHub username extracted from the event.

        Returns
        -------
        WorkflowOutcome
            ``WorkflowSuccess`` with the confirmation text, or
            ``WorkflowFailure`` carrying the engine's message. The kind's
            default message is used when the engine gave none or the client
            raised anything other than ``WorkflowExecutionError``. Only
            expiry of this dispatcher's own bound is reported as
            ``TIMED_OUT``.

        Raises
        ------
        ValueError
            If *identity* is blank.

        """
        request = DispatchRequest(kind=kind, identity=identity)
        deadline = asyncio.timeout(self._timeout_s)
        try:
            async with deadline:
                await self._client.invoke(request.workflow, request.identity)
        except WorkflowExecutionError as exc:
            message = resolve_failure_message(kind, request.identity, exc.message)
            log_error(
                logger,
                "Workflow %s failed for GitHub user %s: %s",
                request.workflow,
                request.identity,
                message,
            )
            return WorkflowFailure(message)
        except TimeoutError as exc:
            if not deadline.expired():
                return self._client_failure(request, exc)
            message = timeout_message(kind, request.identity, self._timeout_s)
            log_error(logger, "%s", message)
            return WorkflowFailure(message, reason=FailureReason.TIMED_OUT)
        except Exception as exc:
            return self._client_failure(request, exc)

        log_info(
            logger,
            "Workflow %s completed for GitHub user %s",
            request.workflow,
            request.identity,
        )
        return WorkflowSuccess(success_message(kind, request.identity))

    def _client_failure(
        self, request: DispatchRequest, exc: Exception
    ) -> WorkflowFailure:
        """Report an exception the client raised outside its error contract."""
        message = resolve_failure_message(request.kind, request.identity, None)
        log_error(
            logger,
            "Workflow %s raised %s for GitHub user %s",
            request.workflow,
            type(exc).__name__,
            request.identity,
            exc_info=exc,
        )
        return WorkflowFailure(message)
