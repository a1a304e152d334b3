"""Liveness and readiness checks for the dispatcher.

Neither check touches the workflow engine: a slow engine must not make
the orchestrator restart a dispatcher that is itself healthy.

Usage
-----
Register the checks on the Falcon app::

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """``GET /health`` returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Report that the process is alive."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """``GET /ready`` returning ``{"status": "ready"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Report that the dispatcher accepts webhook deliveries."""
        resp.media = {"status": "ready"}
        resp.status = HTTPStatus.OK
