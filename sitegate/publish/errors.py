"""Errors raised while validating events and publish configuration."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class PublishEventError(ValueError):
    """Base class for event descriptors that cannot be evaluated.

    Callers must abort the triggering run on this error; no build mode is
    substituted for an invalid event.
    """


class InvalidEventKindError(PublishEventError):
    """Raised when an event kind is not one of the recognised kinds.

    Attributes
    ----------
    event_kind
        The rejected value, as received.

    """

    def __init__(self, message: str, *, event_kind: object) -> None:
        """Initialise with a message and the rejected kind."""
        self.event_kind = event_kind
        super().__init__(message)

    @classmethod
    def unrecognised(
        cls, event_kind: object, valid_kinds: cabc.Iterable[str]
    ) -> InvalidEventKindError:
        """Return an error listing the accepted kinds."""
        valid = ", ".join(f"'{kind}'" for kind in sorted(valid_kinds))
        message = f"Unrecognised event kind {event_kind!r}. Valid kinds are: {valid}"
        return cls(message, event_kind=event_kind)

    @classmethod
    def unsupported_github_event(cls, event_name: str) -> InvalidEventKindError:
        """Return an error for GitHub events that never trigger a build."""
        return cls(
            f"GitHub event {event_name!r} does not trigger a site build",
            event_kind=event_name,
        )


class InvalidBranchIdentifierError(PublishEventError):
    """Raised when an origin branch is missing or is not a branch.

    Attributes
    ----------
    branch
        The rejected branch or ref, as received.

    """

    def __init__(self, message: str, *, branch: object) -> None:
        """Initialise with a message and the rejected identifier."""
        self.branch = branch
        super().__init__(message)

    @classmethod
    def empty(cls, branch: object = "") -> InvalidBranchIdentifierError:
        """Return an error for an empty or blank branch identifier."""
        return cls("Origin branch must be a non-empty identifier", branch=branch)

    @classmethod
    def not_a_branch(cls, ref: str) -> InvalidBranchIdentifierError:
        """Return an error for refs outside ``refs/heads/``."""
        return cls(f"Ref {ref!r} does not name a branch", branch=ref)


class PublishConfigError(ValueError):
    """Raised when publishing configuration is invalid."""

    @classmethod
    def empty_value(cls, env_var: str) -> PublishConfigError:
        """Return an error for a variable that is set but blank."""
        return cls(f"{env_var} must be non-empty when set")

    @classmethod
    def branches_collide(cls, branch: str) -> PublishConfigError:
        """Return an error when output would overwrite the source branch."""
        return cls(
            f"Publishing branch and output branch must differ, both are {branch!r}"
        )


__all__ = [
    "InvalidBranchIdentifierError",
    "InvalidEventKindError",
    "PublishConfigError",
    "PublishEventError",
]
