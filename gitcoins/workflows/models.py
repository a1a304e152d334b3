"""Typed models for workflow dispatch and its outcomes."""

from __future__ import annotations

import dataclasses
import enum

from gitcoins.events.models import EventKind


class WorkflowName(enum.StrEnum):
    """Backend workflows reachable through a workflow client."""

    CREATE_KEY = "create_key"
    PUSH_EVENT = "push_event"
    PULL_REQUEST_REVIEW_EVENT = "pull_request_review_event"


WORKFLOW_FOR_EVENT: dict[EventKind, WorkflowName] = {
    EventKind.KEY_REQUEST: WorkflowName.CREATE_KEY,
    EventKind.PUSH: WorkflowName.PUSH_EVENT,
    EventKind.REVIEW_APPROVAL: WorkflowName.PULL_REQUEST_REVIEW_EVENT,
}


class FailureReason(enum.StrEnum):
    """Why a dispatch did not succeed."""

    WORKFLOW_ERROR = "workflow_error"
    TIMED_OUT = "timed_out"


@dataclasses.dataclass(frozen=True, slots=True)
class DispatchRequest:
    """Validated request to run the workflow for an event kind.

    Raises
    ------
    ValueError
        If ``identity`` is empty or whitespace.

    """

    kind: EventKind
    identity: str

    def __post_init__(self) -> None:
        """Reject blank identities before any workflow is invoked."""
        if not self.identity.strip():
            msg = "DispatchRequest identity must be a non-empty username"
            raise ValueError(msg)

    @property
    def workflow(self) -> WorkflowName:
        """Return the backend workflow serving this request's event kind."""
        return WORKFLOW_FOR_EVENT[self.kind]


@dataclasses.dataclass(frozen=True, slots=True)
class WorkflowSuccess:
    """Workflow completed; ``message`` confirms what was done."""

    message: str


@dataclasses.dataclass(frozen=True, slots=True)
class WorkflowFailure:
    """Workflow failed or did not settle in time."""

    message: str
    reason: FailureReason = FailureReason.WORKFLOW_ERROR


type WorkflowOutcome = WorkflowSuccess | WorkflowFailure
