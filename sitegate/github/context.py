"""Build event descriptors from GitHub Actions runs and webhook deliveries."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

import msgspec

from sitegate.common.refs import branch_from_ref
from sitegate.publish.errors import InvalidEventKindError
from sitegate.publish.models import EventDescriptor, EventKind

from .errors import GitHubContextError
from .payloads import decode_pull_request, decode_push

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_GITHUB_EVENT_KINDS: dict[str, EventKind] = {
    "push": EventKind.PUSH,
    "pull_request": EventKind.REVIEW_REQUEST,
    "pull_request_target": EventKind.REVIEW_REQUEST,
}


def event_kind_from_github(event_name: str) -> EventKind:
    """Map a GitHub event name to an :class:`EventKind`.

    Raises
    ------
    InvalidEventKindError
        If the event is not a push or pull request event.

    """
    try:
        return _GITHUB_EVENT_KINDS[event_name.strip()]
    except KeyError:
        raise InvalidEventKindError.unsupported_github_event(event_name) from None


def _require(environ: cabc.Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if value is None:
        raise GitHubContextError.missing_variable(name)
    return value


def _base_branch_from_event_file(environ: cabc.Mapping[str, str]) -> str:
    """Read the pull request target branch from ``GITHUB_EVENT_PATH``."""
    path = environ.get("GITHUB_EVENT_PATH")
    if not path:
        raise GitHubContextError.missing_variable("GITHUB_BASE_REF")
    try:
        body = Path(path).read_bytes()
    except OSError as exc:
        raise GitHubContextError.unreadable_event_file(path, exc) from exc
    try:
        payload = decode_pull_request(body)
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise GitHubContextError.malformed_payload("pull_request", exc) from exc
    return payload.pull_request.base.ref


def descriptor_from_actions_env(
    environ: cabc.Mapping[str, str] | None = None,
) -> EventDescriptor:
    """Describe the event that started the current GitHub Actions run.

    Reads ``GITHUB_EVENT_NAME``. Pushes take their branch from
    ``GITHUB_REF``; pull requests take the target branch from
    ``GITHUB_BASE_REF``, falling back to the payload at
    ``GITHUB_EVENT_PATH`` when the variable is empty.

    Parameters
    ----------
    environ
        Environment to read; defaults to ``os.environ``.

    Returns
    -------
    EventDescriptor
        Descriptor ready for the publish controller.

    Raises
    ------
    GitHubContextError
        If a required variable is unset or the payload is unusable.
    InvalidEventKindError
        If the run was not started by a push or pull request.
    InvalidBranchIdentifierError
        If the ref does not name a branch.

    """
    env = os.environ if environ is None else environ
    kind = event_kind_from_github(_require(env, "GITHUB_EVENT_NAME"))

    if kind is EventKind.PUSH:
        branch = branch_from_ref(_require(env, "GITHUB_REF"))
    else:
        base_ref = env.get("GITHUB_BASE_REF", "")
        raw = base_ref if base_ref.strip() else _base_branch_from_event_file(env)
        branch = branch_from_ref(raw)

    return EventDescriptor(origin_branch=branch, event_kind=kind)


def descriptor_from_webhook(event_name: str, body: bytes | str) -> EventDescriptor:
    """Describe a GitHub webhook delivery.

    Parameters
    ----------
    event_name
        Value of the ``X-GitHub-Event`` header.
    body
        Raw JSON payload.

    Returns
    -------
    EventDescriptor
        Descriptor ready for the publish controller.

    Raises
    ------
    InvalidEventKindError
        If the delivery is not a push or pull request event.
    GitHubContextError
        If the payload does not match the event's expected shape.
    InvalidBranchIdentifierError
        If the ref does not name a branch.

    """
    kind = event_kind_from_github(event_name)
    try:
        if kind is EventKind.PUSH:
            ref = decode_push(body).ref
        else:
            ref = decode_pull_request(body).pull_request.base.ref
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise GitHubContextError.malformed_payload(event_name, exc) from exc

    return EventDescriptor(origin_branch=branch_from_ref(ref), event_kind=kind)


__all__ = [
    "descriptor_from_actions_env",
    "descriptor_from_webhook",
    "event_kind_from_github",
]
