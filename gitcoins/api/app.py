"""Application factory for the GitCoins Falcon ASGI application.

This module provides ``create_app()`` which builds the Falcon ASGI
application with health endpoints and, when a workflow dispatcher is
supplied, the GitHub webhook endpoints.

Usage
-----
Create a health-only app::

    app = create_app()

Create the full webhook app::

    from gitcoins.api.app import AppDependencies, create_app
    from gitcoins.workflows import InMemoryWorkflowClient, WorkflowDispatcher

    deps = AppDependencies(
        dispatcher=WorkflowDispatcher(InMemoryWorkflowClient(), timeout_s=60),
    )
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from gitcoins.api.errors import InvalidEventError, handle_invalid_event
from gitcoins.api.health.resources import HealthResource, ReadyResource

if typ.TYPE_CHECKING:
    from gitcoins.workflows.dispatcher import WorkflowDispatcher

__all__ = ["WEBHOOK_ROUTE_PREFIX", "AppDependencies", "create_app"]

WEBHOOK_ROUTE_PREFIX = "/api/git"


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    dispatcher
        Workflow dispatcher shared by every webhook request. When ``None``
        only health endpoints are registered.

    """

    dispatcher: WorkflowDispatcher | None = None


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When a dispatcher is present
        the ``/api/git/create-key``, ``/api/git/push-event`` and
        ``/api/git/pr-event`` webhook endpoints are registered.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    app = falcon.asgi.App()

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())

    dispatcher = dependencies.dispatcher if dependencies is not None else None
    if dispatcher is not None:
        from gitcoins.api.webhooks.resources import (
            CreateKeyResource,
            PullRequestReviewResource,
            PushEventResource,
        )

        app.add_route(f"{WEBHOOK_ROUTE_PREFIX}/create-key", CreateKeyResource(dispatcher))
        app.add_route(f"{WEBHOOK_ROUTE_PREFIX}/push-event", PushEventResource(dispatcher))
        app.add_route(
            f"{WEBHOOK_ROUTE_PREFIX}/pr-event", PullRequestReviewResource(dispatcher)
        )

    app.add_error_handler(InvalidEventError, handle_invalid_event)

    return app
