"""Webhook event models and payload extraction.

Public API
----------
EventKind
    Webhook trigger that delivered an event.
RawEvent
    Undecoded payload tagged with its event kind.
verify_key_request_intent
    Gate accepting only ``createKey`` comments.
extract_identity
    Structural lookup of the contributor's GitHub username.
unwrap_form_payload
    Unwrap form-encoded webhook deliveries.
"""

from __future__ import annotations

from gitcoins.events.extraction import (
    CREATE_KEY_COMMAND,
    IDENTITY_PATHS,
    extract_identity,
    unwrap_form_payload,
    verify_key_request_intent,
)
from gitcoins.events.models import ContributorIdentity, EventKind, RawEvent

__all__ = [
    "CREATE_KEY_COMMAND",
    "IDENTITY_PATHS",
    "ContributorIdentity",
    "EventKind",
    "RawEvent",
    "extract_identity",
    "unwrap_form_payload",
    "verify_key_request_intent",
]
