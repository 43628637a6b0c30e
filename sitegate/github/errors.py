"""GitHub event context errors."""

from __future__ import annotations


class GitHubContextError(RuntimeError):
    """Raised when a GitHub runner environment or payload is unusable."""

    @classmethod
    def missing_variable(cls, name: str) -> GitHubContextError:
        """Return an error for a required runner variable that is unset."""
        return cls(f"{name} is required to describe the triggering event")

    @classmethod
    def malformed_payload(cls, event_name: str, detail: object) -> GitHubContextError:
        """Return an error for payloads that fail to decode."""
        return cls(f"Malformed GitHub {event_name} payload: {detail}")

    @classmethod
    def unreadable_event_file(cls, path: str, detail: object) -> GitHubContextError:
        """Return an error when ``GITHUB_EVENT_PATH`` cannot be read."""
        return cls(f"Cannot read GitHub event payload at {path}: {detail}")
