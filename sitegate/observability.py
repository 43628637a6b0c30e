"""Structured log events for publish decisions.

Every event is a single line of the form ``[event.type] key=value ...`` so
CI log search and log aggregators can filter on the event type.
"""

from __future__ import annotations

import enum
import typing as typ

from sitegate.logging import get_logger, log_info, log_warning

if typ.TYPE_CHECKING:
    from sitegate.build.invocation import BuildInvocation
    from sitegate.logging import SupportsLog
    from sitegate.publish.errors import PublishEventError
    from sitegate.publish.models import EventDescriptor, PublishDecision

logger = get_logger(__name__)


class PublishEventType(enum.StrEnum):
    """Structured log event types for the publish workflow."""

    DECISION_MADE = "publish.decision.made"
    EVENT_REJECTED = "publish.event.rejected"
    INVOCATION_DISPATCHED = "publish.invocation.dispatched"


class PublishEventLogger:
    """Emit publish workflow events.

    Decisions and dispatches are logged at INFO, rejected events at
    WARNING. Tokens are never passed to this class.
    """

    def __init__(self, log: SupportsLog | None = None) -> None:
        """Use ``log`` or the module logger."""
        self._logger = log if log is not None else logger

    def log_decision(self, event: EventDescriptor, decision: PublishDecision) -> None:
        """Log the decision reached for ``event``."""
        log_info(
            self._logger,
            "[%s] event_kind=%s origin_branch=%s mode=%s deploy_target_branch=%s",
            PublishEventType.DECISION_MADE,
            event.event_kind,
            event.origin_branch,
            decision.mode,
            decision.deploy_target_branch,
        )

    def log_rejected(self, source: str, error: PublishEventError) -> None:
        """Log an event that could not be evaluated."""
        log_warning(
            self._logger,
            "[%s] source=%s error_type=%s error=%s",
            PublishEventType.EVENT_REJECTED,
            source,
            type(error).__name__,
            error,
        )

    def log_dispatched(self, invocation: BuildInvocation, target: str) -> None:
        """Log delivery of an invocation to a collaborator."""
        log_info(
            self._logger,
            "[%s] job=%s deploy=%s target=%s",
            PublishEventType.INVOCATION_DISPATCHED,
            invocation.job_id,
            invocation.deploys,
            target,
        )


__all__ = ["PublishEventLogger", "PublishEventType"]
