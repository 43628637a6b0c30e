"""sitegate HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that exposes publish decisions over HTTP.

Usage
-----
Create the application::

    from sitegate.api import create_app

    app = create_app()              # default branches
    app = create_app(dependencies)  # explicit controller and logger

Public API
----------
create_app
    Application factory registering health, decision and webhook routes.
"""

from sitegate.api.app import create_app

__all__ = ["create_app"]
