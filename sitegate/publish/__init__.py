"""Publish gating for static-site repositories.

Public API
----------
EventDescriptor
    A single push or review-request event.
EventKind
    Recognised event kinds.
PublishConfig
    Publishing and output branch configuration.
PublishDecision
    Build-only or build-and-deploy outcome.
PublishMode
    The two mutually exclusive modes.
PublishTriggerController
    Pure mapping from events to decisions.
evaluate
    Convenience wrapper around ``PublishTriggerController.evaluate``.

Example:
>>> from sitegate.publish import EventDescriptor, EventKind, evaluate
>>> evaluate(EventDescriptor("code", EventKind.PUSH)).deploy_target_branch
'master'

"""

from __future__ import annotations

from .config import PublishConfig
from .controller import PublishTriggerController, evaluate
from .errors import (
    InvalidBranchIdentifierError,
    InvalidEventKindError,
    PublishConfigError,
    PublishEventError,
)
from .models import EventDescriptor, EventKind, PublishDecision, PublishMode

__all__ = [
    "EventDescriptor",
    "EventKind",
    "InvalidBranchIdentifierError",
    "InvalidEventKindError",
    "PublishConfig",
    "PublishConfigError",
    "PublishDecision",
    "PublishEventError",
    "PublishMode",
    "PublishTriggerController",
    "evaluate",
]
