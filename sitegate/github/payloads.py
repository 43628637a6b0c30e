"""Typed views of the GitHub webhook payload fields sitegate reads.

Only the fields needed to locate the origin branch are declared; all
other payload content is ignored during decoding.
"""

from __future__ import annotations

import msgspec


class GitRef(msgspec.Struct, kw_only=True):
    """Branch side of a pull request.

    Attributes
    ----------
    ref : str
        Bare branch name, e.g. ``code``.
    sha : str, optional
        Head commit of the branch when the event fired.

    """

    ref: str
    sha: str | None = None


class PullRequest(msgspec.Struct, kw_only=True):
    """Pull request fields used to find the target branch."""

    number: int
    base: GitRef
    head: GitRef | None = None


class PushPayload(msgspec.Struct, kw_only=True):
    """Payload of a ``push`` event.

    Attributes
    ----------
    ref : str
        Fully qualified ref pushed to, e.g. ``refs/heads/code``.
    before : str, optional
        Commit the ref pointed at before the push.
    after : str, optional
        Commit the ref points at after the push.

    """

    ref: str
    before: str | None = None
    after: str | None = None


class PullRequestPayload(msgspec.Struct, kw_only=True):
    """Payload of a ``pull_request`` or ``pull_request_target`` event."""

    pull_request: PullRequest
    action: str | None = None


_PUSH_DECODER = msgspec.json.Decoder(PushPayload)
_PULL_REQUEST_DECODER = msgspec.json.Decoder(PullRequestPayload)


def decode_push(body: bytes | str) -> PushPayload:
    """Decode a push payload, raising ``msgspec`` errors on bad input."""
    return _PUSH_DECODER.decode(body)


def decode_pull_request(body: bytes | str) -> PullRequestPayload:
    """Decode a pull request payload, raising ``msgspec`` errors on bad input."""
    return _PULL_REQUEST_DECODER.decode(body)
