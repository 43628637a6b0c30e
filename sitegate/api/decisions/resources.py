"""Decision endpoints.

``POST /decisions`` evaluates an explicit event descriptor;
``POST /webhooks/github`` evaluates a GitHub webhook delivery. Both return
the decision and the workflow job that carries it out.

Usage
-----
Register the resources on the Falcon app::

    app.add_route("/decisions", DecisionResource(dependencies))
    app.add_route("/webhooks/github", GitHubWebhookResource(dependencies))

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon
import msgspec

from sitegate.api.errors import InvalidInputError
from sitegate.build.invocation import plan_build
from sitegate.github.context import descriptor_from_webhook
from sitegate.publish.errors import PublishEventError
from sitegate.publish.models import EventDescriptor

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from sitegate.observability import PublishEventLogger
    from sitegate.publish.controller import PublishTriggerController

__all__ = [
    "DecisionRequest",
    "DecisionResource",
    "DecisionResourceDependencies",
    "GitHubWebhookResource",
]

GITHUB_EVENT_HEADER = "X-GitHub-Event"


class DecisionRequest(msgspec.Struct, kw_only=True, forbid_unknown_fields=True):
    """Body of ``POST /decisions``."""

    event_kind: str
    origin_branch: str


@dc.dataclass(frozen=True, slots=True)
class DecisionResourceDependencies:
    """Collaborators shared by the decision resources.

    Attributes
    ----------
    controller
        Controller that evaluates events.
    event_logger
        Structured logger for decisions and rejections.

    """

    controller: PublishTriggerController
    event_logger: PublishEventLogger


class _DecisionEndpoint:
    """Evaluate a descriptor and render the response."""

    source = "api"

    def __init__(self, dependencies: DecisionResourceDependencies) -> None:
        self._controller = dependencies.controller
        self._events = dependencies.event_logger

    def _respond(self, event: EventDescriptor, resp: Response) -> None:
        try:
            decision = self._controller.evaluate(event)
        except PublishEventError as exc:
            self._events.log_rejected(self.source, exc)
            raise

        self._events.log_decision(event, decision)
        invocation = plan_build(decision, self._controller.config)
        resp.media = {**decision.as_dict(), "job": invocation.job_id}
        resp.status = falcon.HTTP_200


class DecisionResource(_DecisionEndpoint):
    """``POST /decisions`` with ``event_kind`` and ``origin_branch``."""

    async def on_post(self, req: Request, resp: Response) -> None:
        """Evaluate the event described in the JSON body."""
        media = await req.get_media(default_when_empty=None)
        if media is None:
            msg = "request body is required"
            raise InvalidInputError(msg)
        try:
            body = msgspec.convert(media, type=DecisionRequest)
        except msgspec.ValidationError as exc:
            raise InvalidInputError(str(exc)) from exc

        self._respond(
            EventDescriptor(
                origin_branch=body.origin_branch,
                event_kind=body.event_kind,
            ),
            resp,
        )


class GitHubWebhookResource(_DecisionEndpoint):
    """``POST /webhooks/github`` for push and pull request deliveries."""

    source = "github-webhook"

    async def on_post(self, req: Request, resp: Response) -> None:
        """Evaluate the webhook named by the ``X-GitHub-Event`` header."""
        event_name = req.get_header(GITHUB_EVENT_HEADER)
        if not event_name:
            raise InvalidInputError.missing_header(GITHUB_EVENT_HEADER)

        body = await req.stream.read()
        try:
            event = descriptor_from_webhook(event_name, body)
        except PublishEventError as exc:
            self._events.log_rejected(self.source, exc)
            raise

        self._respond(event, resp)
