"""Falcon resources receiving GitHub webhook deliveries.

Each resource serves one event kind and runs the same linear pipeline:
optional intent gate, identity extraction, workflow dispatch, response.
Validation failures raise :class:`InvalidEventError`, which the app maps
to a 400; workflow outcomes are written directly.

Usage
-----
Register the resources on the Falcon app::

    app.add_route("/api/git/create-key", CreateKeyResource(dispatcher))
    app.add_route("/api/git/push-event", PushEventResource(dispatcher))
    app.add_route("/api/git/pr-event", PullRequestReviewResource(dispatcher))

"""

from __future__ import annotations

import typing as typ

import falcon

from gitcoins.api.errors import InvalidEventError
from gitcoins.events import (
    EventKind,
    RawEvent,
    extract_identity,
    unwrap_form_payload,
    verify_key_request_intent,
)
from gitcoins.logging import get_logger, log_error, log_info
from gitcoins.workflows.messages import INVALID_KEY_REQUEST_COMMENT, MISSING_USERNAME
from gitcoins.workflows.models import FailureReason, WorkflowSuccess

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from gitcoins.workflows.dispatcher import WorkflowDispatcher
    from gitcoins.workflows.models import WorkflowOutcome

__all__ = [
    "CreateKeyResource",
    "PullRequestReviewResource",
    "PushEventResource",
]

logger = get_logger(__name__)

_FAILURE_STATUS: dict[FailureReason, str] = {
    FailureReason.WORKFLOW_ERROR: falcon.HTTP_400,
    FailureReason.TIMED_OUT: falcon.HTTP_504,
}


async def _read_event(req: Request, kind: EventKind) -> RawEvent:
    """Read the request body as a raw event of *kind*."""
    body = await req.stream.read()
    text = body.decode("utf-8", errors="replace")
    return RawEvent(kind=kind, text=unwrap_form_payload(text))


def _write_outcome(resp: Response, outcome: WorkflowOutcome) -> None:
    """Render a workflow outcome as a plain-text response."""
    resp.content_type = falcon.MEDIA_TEXT
    resp.text = outcome.message
    if isinstance(outcome, WorkflowSuccess):
        resp.status = falcon.HTTP_201
    else:
        resp.status = _FAILURE_STATUS[outcome.reason]


class _WebhookResource:
    """Shared pipeline for webhook endpoints."""

    kind: typ.ClassVar[EventKind]

    def __init__(self, dispatcher: WorkflowDispatcher) -> None:
        """Configure the resource with the shared dispatcher."""
        self._dispatcher = dispatcher

    def _check_intent(self, event: RawEvent) -> None:
        """Reject events that do not ask for this endpoint's action."""

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle a webhook delivery.

        Parameters
        ----------
        req
            Falcon request carrying the raw event payload.
        resp
            Falcon response populated with the plain-text outcome.

        Raises
        ------
        InvalidEventError
            If the event fails the intent gate or names no GitHub user.

        """
        event = await _read_event(req, self.kind)
        log_info(
            logger,
            "Received %s webhook (delivery=%s)",
            event.kind,
            req.get_header("X-GitHub-Delivery") or "unknown",
        )
        self._check_intent(event)

        identity = extract_identity(event.text, event.kind)
        if identity is None:
            raise InvalidEventError(MISSING_USERNAME)

        outcome = await self._dispatcher.dispatch(event.kind, identity)
        _write_outcome(resp, outcome)


class CreateKeyResource(_WebhookResource):
    """``POST /api/git/create-key``, for pull request review comment webhooks.

    Only comments that are exactly ``createKey`` register a public key for
    the comment author.
    """

    kind = EventKind.KEY_REQUEST

    def _check_intent(self, event: RawEvent) -> None:
        if not verify_key_request_intent(event.text):
            log_error(logger, INVALID_KEY_REQUEST_COMMENT)
            raise InvalidEventError(INVALID_KEY_REQUEST_COMMENT)


class PushEventResource(_WebhookResource):
    """``POST /api/git/push-event``; rewards the pusher."""

    kind = EventKind.PUSH


class PullRequestReviewResource(_WebhookResource):
    """``POST /api/git/pr-event``; rewards the reviewer."""

    kind = EventKind.REVIEW_APPROVAL
