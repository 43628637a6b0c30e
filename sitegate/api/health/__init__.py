"""Health probe resources.

Usage
-----
Import health resources for route registration::

    from sitegate.api.health.resources import HealthResource, ReadyResource
"""
