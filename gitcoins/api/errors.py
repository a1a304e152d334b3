"""Webhook validation errors and their Falcon error handler.

Usage
-----
Register the handler on the Falcon app::

    from gitcoins.api.errors import InvalidEventError, handle_invalid_event

    app.add_error_handler(InvalidEventError, handle_invalid_event)

"""

from __future__ import annotations

import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["InvalidEventError", "handle_invalid_event"]


class InvalidEventError(Exception):
    """Raised when a webhook payload cannot be dispatched.

    Covers a ``createKey`` request whose comment is not the command and
    any event without a usable GitHub username. Only these intentional
    rejections become 400 responses; anything else still surfaces as a 500.

    Attributes
    ----------
    reason
        Response text sent back to the webhook sender.

    """

    def __init__(self, reason: str) -> None:
        """Initialize with the text returned to the webhook sender."""
        self.reason = reason
        super().__init__(reason)


async def handle_invalid_event(
    _req: Request,
    resp: Response,
    ex: InvalidEventError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidEventError`` to an HTTP 400 plain-text response.

    Parameters
    ----------
    _req
        Falcon request (unused).
    resp
        Falcon response whose status and body are set.
    ex
        The rejection carrying the response text.
    _params
        URI template parameters (unused).

    """
    resp.status = falcon.HTTP_400
    resp.content_type = falcon.MEDIA_TEXT
    resp.text = ex.reason
