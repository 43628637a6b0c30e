"""Liveness and readiness probes.

The probes need no collaborators and are registered on every app.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """``GET /health`` returns ``{"status": "ok"}`` while the process runs."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Report liveness."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """``GET /ready`` reports the publishing branches the app decides for."""

    def __init__(self, publish_branch: str, pages_branch: str) -> None:
        """Store the branches reported by the probe."""
        self._publish_branch = publish_branch
        self._pages_branch = pages_branch

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Report readiness with the active branch configuration."""
        resp.media = {
            "status": "ready",
            "publish_branch": self._publish_branch,
            "pages_branch": self._pages_branch,
        }
        resp.status = HTTPStatus.OK
