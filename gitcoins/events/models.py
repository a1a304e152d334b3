"""Typed models for inbound webhook events."""

from __future__ import annotations

import dataclasses
import enum


class EventKind(enum.StrEnum):
    """Webhook trigger that delivered an event."""

    KEY_REQUEST = "key_request"
    PUSH = "push"
    REVIEW_APPROVAL = "review_approval"


@dataclasses.dataclass(frozen=True, slots=True)
class RawEvent:
    """Undecoded webhook payload tagged with the trigger that sent it."""

    kind: EventKind
    text: str


# GitHub username credited with the triggering action.
type ContributorIdentity = str
