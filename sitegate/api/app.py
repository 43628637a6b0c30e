"""Application factory for the sitegate Falcon ASGI application.

Usage
-----
Create an app deciding with the default branches::

    app = create_app()

Or with explicit collaborators::

    from sitegate.api.app import AppDependencies, create_app
    from sitegate.publish import PublishConfig, PublishTriggerController

    deps = AppDependencies(
        controller=PublishTriggerController(PublishConfig(pages_branch="gh-pages")),
    )
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc

import falcon.asgi

from sitegate.api.decisions.resources import (
    DecisionResource,
    DecisionResourceDependencies,
    GitHubWebhookResource,
)
from sitegate.api.errors import register_error_handlers
from sitegate.api.health.resources import HealthResource, ReadyResource
from sitegate.observability import PublishEventLogger
from sitegate.publish.controller import PublishTriggerController

__all__ = ["AppDependencies", "create_app"]


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    controller
        Controller used by the decision endpoints.
    event_logger
        Structured logger for decisions and rejected events.

    """

    controller: PublishTriggerController = dc.field(
        default_factory=PublishTriggerController
    )
    event_logger: PublishEventLogger = dc.field(default_factory=PublishEventLogger)


def create_app(dependencies: AppDependencies | None = None) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Registers ``/health``, ``/ready``, ``POST /decisions`` and
    ``POST /webhooks/github`` along with the error handlers that turn
    rejected events into HTTP 400 responses.

    Parameters
    ----------
    dependencies
        Optional collaborators. Defaults decide with ``PublishConfig()``.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    deps = dependencies if dependencies is not None else AppDependencies()
    config = deps.controller.config

    app = falcon.asgi.App()

    app.add_route("/health", HealthResource())
    app.add_route(
        "/ready",
        ReadyResource(config.publish_branch, config.pages_branch),
    )

    resource_deps = DecisionResourceDependencies(
        controller=deps.controller,
        event_logger=deps.event_logger,
    )
    app.add_route("/decisions", DecisionResource(resource_deps))
    app.add_route("/webhooks/github", GitHubWebhookResource(resource_deps))

    register_error_handlers(app)
    return app
