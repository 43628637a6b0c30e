"""GitHub adapters producing event descriptors."""

from __future__ import annotations

from .context import (
    descriptor_from_actions_env,
    descriptor_from_webhook,
    event_kind_from_github,
)
from .errors import GitHubContextError

__all__ = [
    "GitHubContextError",
    "descriptor_from_actions_env",
    "descriptor_from_webhook",
    "event_kind_from_github",
]
