"""sitegate runtime entrypoint.

This module provides the ASGI application factory used by Granian. It
builds the publish controller from ``SITEGATE_*`` environment variables
and delegates app construction to :func:`sitegate.api.app.create_app`.

Configuration is driven by environment variables:

- ``SITEGATE_HOST``: Bind address (default ``0.0.0.0``)
- ``SITEGATE_PORT``: Listen port (default ``8080``)
- ``SITEGATE_LOG_LEVEL``: Log level (default ``INFO``)
- ``SITEGATE_PUBLISH_BRANCH``, ``SITEGATE_PAGES_BRANCH``,
  ``SITEGATE_BUILD_DIR``: see :class:`sitegate.publish.PublishConfig`

Run the service directly with ``python -m sitegate.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from sitegate.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
    except ValueError as exc:
        log_error(logger, "Invalid SITEGATE_PORT value: %r", port_str)
        raise SystemExit(1) from exc
    if not _MIN_PORT <= port <= _MAX_PORT:
        log_error(
            logger,
            "Invalid SITEGATE_PORT value: %d (must be %d-%d)",
            port,
            _MIN_PORT,
            _MAX_PORT,
        )
        raise SystemExit(1)
    return port


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from environment configuration.

    Raises
    ------
    PublishConfigError
        If the branch configuration in the environment is invalid.

    """
    from sitegate.api.app import AppDependencies
    from sitegate.api.app import create_app as _create_api_app
    from sitegate.publish import PublishConfig, PublishTriggerController

    controller = PublishTriggerController(PublishConfig.from_env())
    return _create_api_app(AppDependencies(controller=controller))


def main() -> None:
    """Start the sitegate decision service using Granian."""
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("SITEGATE_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("SITEGATE_PORT", "8080"))
    log_level_str = os.environ.get("SITEGATE_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid SITEGATE_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting sitegate on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "sitegate.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
