"""Structural field lookup over raw GitHub webhook payloads.

GitHub's payload shape differs between event sub-types, so these helpers
do not validate against a schema. The payload is decoded into a generic
document and walked breadth-first; a string leaf matches a lookup path
when its key path contains the expected keys in order and ends on the
expected field. ``("comment", "user", "login")`` therefore matches
``comment.user.login`` as well as a wrapped
``data.comment.user.login``, but never ``issue.user.login``.

Usage
-----
>>> from gitcoins.events import EventKind, extract_identity
>>> extract_identity('{"pusher": {"name": "alice"}}', EventKind.PUSH)
'alice'
>>> extract_identity('{"pusher": {}}', EventKind.PUSH) is None
True

"""

from __future__ import annotations

import collections
import typing as typ
from urllib.parse import parse_qs

import msgspec

from gitcoins.events.models import EventKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from gitcoins.events.models import ContributorIdentity

__all__ = [
    "CREATE_KEY_COMMAND",
    "IDENTITY_PATHS",
    "extract_identity",
    "unwrap_form_payload",
    "verify_key_request_intent",
]

CREATE_KEY_COMMAND = "createKey"

IDENTITY_PATHS: dict[EventKind, tuple[str, ...]] = {
    EventKind.KEY_REQUEST: ("comment", "user", "login"),
    EventKind.PUSH: ("pusher", "name"),
    EventKind.REVIEW_APPROVAL: ("review", "user", "login"),
}

_COMMENT_BODY_PATH = ("comment", "body")

type _KeyPath = tuple[str, ...]


def _decode(text: str) -> object | None:
    """Decode *text* as JSON, returning ``None`` when it is not JSON."""
    try:
        return msgspec.json.decode(text)
    except msgspec.DecodeError:
        return None


def _iter_leaves(document: object) -> cabc.Iterator[tuple[_KeyPath, object]]:
    """Yield ``(key_path, value)`` for every scalar leaf, shallowest first.

    List items inherit the key path of their list, so ``commits[0].id``
    is reported as ``("commits", "id")``.
    """
    queue: collections.deque[tuple[_KeyPath, object]] = collections.deque(
        [((), document)]
    )
    while queue:
        path, node = queue.popleft()
        if isinstance(node, dict):
            mapping = typ.cast("dict[object, object]", node)
            queue.extend(((*path, str(key)), value) for key, value in mapping.items())
        elif isinstance(node, list):
            items = typ.cast("list[object]", node)
            queue.extend((path, item) for item in items)
        else:
            yield path, node


def _matches(path: _KeyPath, expected: _KeyPath) -> bool:
    """Return True when *path* ends on the expected field via its parents."""
    if not path or path[-1] != expected[-1]:
        return False
    remaining = iter(path[:-1])
    return all(key in remaining for key in expected[:-1])


def _find_strings(document: object, expected: _KeyPath) -> cabc.Iterator[str]:
    """Yield string values found at *expected*, shallowest first."""
    for path, value in _iter_leaves(document):
        if isinstance(value, str) and _matches(path, expected):
            yield value


def unwrap_form_payload(text: str) -> str:
    """Return the JSON document from a form-encoded webhook delivery.

    GitHub webhooks configured with ``application/x-www-form-urlencoded``
    send the JSON document in a ``payload`` field. JSON bodies and bodies
    without that field are returned unchanged.
    """
    if text.lstrip().startswith(("{", "[")):
        return text
    fields = parse_qs(text, keep_blank_values=True)
    payloads = fields.get("payload")
    if not payloads:
        return text
    return payloads[0]


def verify_key_request_intent(text: str) -> bool:
    """Return True when the payload's comment body is exactly ``createKey``.

    The comparison is case-sensitive and does not trim whitespace. Payloads
    that are not JSON or carry no comment body are rejected.

    Parameters
    ----------
    text
        Raw webhook payload.

    Returns
    -------
    bool
        Whether the comment asks for a new public key.

    """
    document = _decode(text)
    if document is None:
        return False
    body = next(_find_strings(document, _COMMENT_BODY_PATH), None)
    return body == CREATE_KEY_COMMAND


def extract_identity(text: str, kind: EventKind) -> ContributorIdentity | None:
    """Extract the GitHub username credited for an event.

    Parameters
    ----------
    text
        Raw webhook payload.
    kind
        Trigger that delivered the payload; selects the lookup path from
        :data:`IDENTITY_PATHS`.

    Returns
    -------
    ContributorIdentity | None
        The trimmed username from the shallowest non-blank match, or
        ``None`` when the payload is not JSON or holds no usable value.

    """
    document = _decode(text)
    if document is None:
        return None
    for candidate in _find_strings(document, IDENTITY_PATHS[kind]):
        identity = candidate.strip()
        if identity:
            return identity
    return None
