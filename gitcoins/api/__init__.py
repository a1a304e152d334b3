"""GitCoins HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives GitHub webhook deliveries.

Usage
-----
Create and run the application::

    from gitcoins.api import create_app

    app = create_app()              # health-only mode
    app = create_app(dependencies)  # webhook endpoints enabled

Public API
----------
create_app
    Application factory registering health endpoints and, when a
    workflow dispatcher is provided, the webhook endpoints.
"""

from gitcoins.api.app import create_app

__all__ = ["create_app"]
