"""Publish trigger controller.

Maps each event to exactly one publish decision. Pushes to the publishing
branch are built and deployed to the output branch; everything else,
including every review request, is built only.

The controller is pure: it performs no I/O and keeps no state between
calls, so a single instance can serve concurrent callers.
"""

from __future__ import annotations

from sitegate.publish.config import PublishConfig
from sitegate.publish.errors import (
    InvalidBranchIdentifierError,
    InvalidEventKindError,
)
from sitegate.publish.models import (
    EventDescriptor,
    EventKind,
    PublishDecision,
)

_VALID_KINDS = frozenset(kind.value for kind in EventKind)


def coerce_event_kind(event_kind: object) -> EventKind:
    """Return ``event_kind`` as an :class:`EventKind`.

    Raises
    ------
    InvalidEventKindError
        If the value is neither a member nor the value of a member.

    """
    if isinstance(event_kind, EventKind):
        return event_kind
    if isinstance(event_kind, str) and event_kind in _VALID_KINDS:
        return EventKind(event_kind)
    raise InvalidEventKindError.unrecognised(event_kind, _VALID_KINDS)


def validate_branch(origin_branch: object) -> str:
    """Return ``origin_branch`` if it is a non-blank string.

    Raises
    ------
    InvalidBranchIdentifierError
        If the branch is not a string or is blank.

    """
    if not isinstance(origin_branch, str) or not origin_branch.strip():
        raise InvalidBranchIdentifierError.empty(origin_branch)
    return origin_branch


class PublishTriggerController:
    """Decide between build-only and build-and-deploy for each event."""

    def __init__(self, config: PublishConfig | None = None) -> None:
        """Bind the controller to its branch configuration."""
        self._config = config if config is not None else PublishConfig()

    @property
    def config(self) -> PublishConfig:
        """Return the branch configuration in use."""
        return self._config

    def evaluate(self, event: EventDescriptor) -> PublishDecision:
        """Return the publish decision for ``event``.

        Parameters
        ----------
        event
            The triggering event.

        Returns
        -------
        PublishDecision
            ``BUILD_AND_DEPLOY`` targeting the output branch for a push to
            the publishing branch, otherwise ``BUILD_ONLY``.

        Raises
        ------
        InvalidEventKindError
            If the event kind is not recognised.
        InvalidBranchIdentifierError
            If the origin branch is empty.

        """
        kind = coerce_event_kind(event.event_kind)
        branch = validate_branch(event.origin_branch)

        if kind is EventKind.PUSH and branch == self._config.publish_branch:
            return PublishDecision.build_and_deploy(self._config.pages_branch)
        return PublishDecision.build_only()


def evaluate(
    event: EventDescriptor, config: PublishConfig | None = None
) -> PublishDecision:
    """Evaluate ``event`` with ``config``, or with the default branches."""
    return PublishTriggerController(config).evaluate(event)


__all__ = [
    "PublishTriggerController",
    "coerce_event_kind",
    "evaluate",
    "validate_branch",
]
