"""Contract with the external site-building action."""

from __future__ import annotations

from .collaborator import BuildCollaborator, GitHubOutputCollaborator
from .errors import BuildConfigError
from .invocation import (
    DEFAULT_DEPLOY_ACTION,
    BuildInvocation,
    job_id_for,
    plan_build,
)

__all__ = [
    "DEFAULT_DEPLOY_ACTION",
    "BuildCollaborator",
    "BuildConfigError",
    "BuildInvocation",
    "GitHubOutputCollaborator",
    "job_id_for",
    "plan_build",
]
