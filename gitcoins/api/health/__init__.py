"""Health check resources.

Usage
-----
Import health resources for route registration::

    from gitcoins.api.health.resources import HealthResource, ReadyResource
"""
