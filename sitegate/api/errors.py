"""Request validation errors and Falcon error handlers.

Usage
-----
Register the handlers on the Falcon app::

    from sitegate.api.errors import register_error_handlers

    register_error_handlers(app)

"""

from __future__ import annotations

import typing as typ

import falcon

from sitegate.github.errors import GitHubContextError
from sitegate.publish.errors import PublishEventError

if typ.TYPE_CHECKING:
    from falcon.asgi import App, Request, Response

__all__ = [
    "InvalidInputError",
    "handle_github_context_error",
    "handle_invalid_input",
    "handle_publish_event_error",
    "register_error_handlers",
]


class InvalidInputError(Exception):
    """Raised for request bodies or headers that fail validation.

    Attributes
    ----------
    reason
        Human-readable description of the validation failure.
    field
        Optional name of the input field or header that failed.

    """

    def __init__(self, reason: str, *, field: str | None = None) -> None:
        """Initialise with a validation reason and optional field name."""
        self.reason = reason
        self.field = field
        message = f"{field}: {reason}" if field is not None else reason
        super().__init__(message)

    @classmethod
    def missing_header(cls, header: str) -> InvalidInputError:
        """Return an error for a required header that is absent."""
        return cls("header is required", field=header)


async def handle_invalid_input(
    _req: Request,
    resp: Response,
    ex: InvalidInputError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidInputError`` to an HTTP 400 JSON response."""
    resp.status = falcon.HTTP_400
    media: dict[str, str] = {
        "title": "Invalid input",
        "description": ex.reason,
    }
    if ex.field is not None:
        media["field"] = ex.field
    resp.media = media


async def handle_publish_event_error(
    _req: Request,
    resp: Response,
    ex: PublishEventError,
    _params: dict[str, typ.Any],
) -> None:
    """Map an unevaluable event to an HTTP 400 JSON response.

    No decision is returned, so callers cannot mistake a rejected event
    for a build-only result.
    """
    resp.status = falcon.HTTP_400
    resp.media = {
        "title": "Invalid event",
        "description": str(ex),
        "error": type(ex).__name__,
    }


async def handle_github_context_error(
    _req: Request,
    resp: Response,
    ex: GitHubContextError,
    _params: dict[str, typ.Any],
) -> None:
    """Map a malformed GitHub payload to an HTTP 400 JSON response."""
    resp.status = falcon.HTTP_400
    resp.media = {
        "title": "Malformed GitHub payload",
        "description": str(ex),
    }


def register_error_handlers(app: App) -> None:
    """Attach every sitegate error handler to ``app``."""
    app.add_error_handler(InvalidInputError, handle_invalid_input)
    app.add_error_handler(PublishEventError, handle_publish_event_error)
    app.add_error_handler(GitHubContextError, handle_github_context_error)
