"""GitHub webhook resources.

Usage
-----
Import webhook resources for route registration::

    from gitcoins.api.webhooks.resources import (
        CreateKeyResource,
        PullRequestReviewResource,
        PushEventResource,
    )
"""
