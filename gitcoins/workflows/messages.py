"""Response text for each event kind.

Usage
-----
>>> from gitcoins.events import EventKind
>>> success_message(EventKind.PUSH, "alice")
'GitCoin issued to: alice for a push.'
>>> default_failure_message(EventKind.PUSH, "alice")
'Could not complete push flow for GitHub user: alice'

"""

from __future__ import annotations

from gitcoins.events.models import EventKind

__all__ = [
    "INVALID_KEY_REQUEST_COMMENT",
    "MISSING_USERNAME",
    "default_failure_message",
    "resolve_failure_message",
    "success_message",
    "timeout_message",
]

MISSING_USERNAME = "Github username must be present."
INVALID_KEY_REQUEST_COMMENT = "Invalid pr comment. Please comment 'createKey'."

_SUCCESS_TEMPLATES: dict[EventKind, str] = {
    EventKind.KEY_REQUEST: "New public key generated for GitHub user: {identity}",
    EventKind.PUSH: "GitCoin issued to: {identity} for a push.",
    EventKind.REVIEW_APPROVAL: "GitCoin issued to: {identity} for a pull request review.",
}

_FAILURE_TEMPLATES: dict[EventKind, str] = {
    EventKind.KEY_REQUEST: "Could not create new public key for GitHub user: {identity}",
    EventKind.PUSH: "Could not complete push flow for GitHub user: {identity}",
    EventKind.REVIEW_APPROVAL: (
        "Could not complete pull request review flow for GitHub user: {identity}"
    ),
}

_WORKFLOW_LABELS: dict[EventKind, str] = {
    EventKind.KEY_REQUEST: "create key",
    EventKind.PUSH: "push",
    EventKind.REVIEW_APPROVAL: "pull request review",
}


def success_message(kind: EventKind, identity: str) -> str:
    """Return the confirmation sent when the workflow for *kind* succeeds."""
    return _SUCCESS_TEMPLATES[kind].format(identity=identity)


def default_failure_message(kind: EventKind, identity: str) -> str:
    """Return the failure text used when the engine gives no message."""
    return _FAILURE_TEMPLATES[kind].format(identity=identity)


def resolve_failure_message(kind: EventKind, identity: str, message: str | None) -> str:
    """Prefer the engine's *message*, falling back to the kind's default."""
    if message is not None and message.strip():
        return message
    return default_failure_message(kind, identity)


def timeout_message(kind: EventKind, identity: str, timeout_s: float) -> str:
    """Return the failure text for a workflow that did not settle in time."""
    label = _WORKFLOW_LABELS[kind]
    return (
        f"Timed out after {timeout_s:g}s waiting for {label} flow "
        f"for GitHub user: {identity}"
    )
