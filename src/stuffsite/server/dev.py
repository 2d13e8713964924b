"""Development server with hot reload.

Starts a pounce ASGI server with the live App object.
Uses single-worker mode with reload enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stuffsite.config import AppConfig


def run_dev_server(
    app: object,
    config: AppConfig,
    host: str,
    port: int,
    *,
    reload: bool = True,
    app_path: str | None = None,
) -> None:
    """Start a pounce dev server with the given App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but here we hold a live ``App`` object, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Args:
        app: ASGI callable (App instance).
        config: App configuration; supplies reload and logging settings.
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=config.reload_include,
        reload_dirs=config.reload_dirs,
        log_level=config.log_level,
    )
    server = Server(server_config, app, app_path=app_path)
    server.run()
