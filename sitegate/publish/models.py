"""Event descriptors and publish decisions.

Both types are immutable and built fresh for every triggering event.
"""

from __future__ import annotations

import dataclasses as dc
import enum


class EventKind(enum.StrEnum):
    """Kinds of repository events that can trigger a site build."""

    PUSH = "push"
    REVIEW_REQUEST = "review_request"


class PublishMode(enum.StrEnum):
    """What the site-building collaborator is asked to do."""

    BUILD_ONLY = "build_only"
    BUILD_AND_DEPLOY = "build_and_deploy"


@dc.dataclass(frozen=True, slots=True)
class EventDescriptor:
    """One triggering event.

    Attributes
    ----------
    origin_branch
        Branch pushed to, or the branch a review request targets.
    event_kind
        Kind of event. Values are validated on evaluation rather than on
        construction so that adapters can pass raw input through.

    """

    origin_branch: str
    event_kind: EventKind | str


@dc.dataclass(frozen=True, slots=True)
class PublishDecision:
    """Outcome of evaluating an :class:`EventDescriptor`.

    Attributes
    ----------
    mode
        Build-only verification or build-and-deploy.
    deploy_target_branch
        Branch receiving the generated output. Set if and only if ``mode``
        is ``BUILD_AND_DEPLOY``.

    """

    mode: PublishMode
    deploy_target_branch: str | None = None

    def __post_init__(self) -> None:
        """Reject decisions whose target branch does not match the mode."""
        if self.mode is PublishMode.BUILD_AND_DEPLOY:
            if not self.deploy_target_branch:
                msg = "build_and_deploy decisions require a deploy_target_branch"
                raise ValueError(msg)
        elif self.deploy_target_branch is not None:
            msg = "build_only decisions must not carry a deploy_target_branch"
            raise ValueError(msg)

    @classmethod
    def build_only(cls) -> PublishDecision:
        """Return a verification-only decision."""
        return cls(mode=PublishMode.BUILD_ONLY)

    @classmethod
    def build_and_deploy(cls, target_branch: str) -> PublishDecision:
        """Return a decision publishing the output to ``target_branch``."""
        return cls(
            mode=PublishMode.BUILD_AND_DEPLOY,
            deploy_target_branch=target_branch,
        )

    @property
    def deploys(self) -> bool:
        """Return True when the decision publishes output."""
        return self.mode is PublishMode.BUILD_AND_DEPLOY

    def as_dict(self) -> dict[str, str | None]:
        """Return a JSON-compatible mapping of the decision."""
        return {
            "mode": str(self.mode),
            "deploy_target_branch": self.deploy_target_branch,
        }
