"""Errors raised while preparing or dispatching a build invocation."""

from __future__ import annotations


class BuildConfigError(ValueError):
    """Raised when inputs for the site-building action are invalid."""

    @classmethod
    def empty_token(cls) -> BuildConfigError:
        """Return an error when no repository token is available."""
        return cls("GITHUB_TOKEN must be non-empty to run the deploy action")

    @classmethod
    def multiline_output(cls, key: str) -> BuildConfigError:
        """Return an error for step outputs that would span several lines."""
        return cls(f"Step output {key!r} must be a single line")
