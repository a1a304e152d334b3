"""GitCoins runtime entrypoint.

This module provides the ASGI application factory used by Granian. It
delegates to :func:`gitcoins.api.app.create_app` while keeping the
``gitcoins.runtime:create_app`` entrypoint stable.

When ``GITCOINS_WORKFLOW_BACKEND`` is set, the runtime builds the shared
workflow client and dispatcher so the webhook endpoints are served.
Otherwise it starts in health-only mode.

Configuration is driven by environment variables:

- ``GITCOINS_HOST``: Bind address (default ``0.0.0.0``)
- ``GITCOINS_PORT``: Listen port (default ``8080``)
- ``GITCOINS_LOG_LEVEL``: Log level (default ``INFO``)
- ``GITCOINS_WORKFLOW_BACKEND`` and related variables: see
  :class:`gitcoins.workflows.config.WorkflowEngineConfig`

Run the service directly with ``python -m gitcoins.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from gitcoins.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid GITCOINS_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from the environment.

    Returns
    -------
    falcon.asgi.App
        App serving the webhook endpoints when a workflow backend is
        configured, otherwise only ``/health`` and ``/ready``.

    Raises
    ------
    WorkflowConfigError
        If the workflow backend configuration is invalid.

    """
    from gitcoins.api.app import AppDependencies
    from gitcoins.api.app import create_app as _create_api_app

    if os.environ.get("GITCOINS_WORKFLOW_BACKEND") is None:
        log_warning(
            logger,
            "GITCOINS_WORKFLOW_BACKEND is not set; serving health endpoints only",
        )
        return _create_api_app()

    from gitcoins.workflows import (
        WorkflowDispatcher,
        WorkflowEngineConfig,
        create_workflow_client,
    )

    config = WorkflowEngineConfig.from_env()
    dispatcher = WorkflowDispatcher(
        create_workflow_client(config),
        timeout_s=config.dispatch_timeout_s,
    )
    log_info(
        logger,
        "Dispatching webhooks to the %s workflow backend (timeout=%s)",
        config.backend,
        config.dispatch_timeout_s,
    )
    return _create_api_app(AppDependencies(dispatcher=dispatcher))


def main() -> None:
    """Start the GitCoins runtime server using Granian."""
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("GITCOINS_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("GITCOINS_PORT", "8080"))
    log_level_str = os.environ.get("GITCOINS_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GITCOINS_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting GitCoins runtime on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "gitcoins.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
