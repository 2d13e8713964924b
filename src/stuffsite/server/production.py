"""Production server.

Starts a pounce server without reload, with the worker count and
connection limits taken from AppConfig.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stuffsite.config import AppConfig


def run_production_server(
    app: object,
    config: AppConfig,
    host: str,
    port: int,
) -> None:
    """Run the app under pounce in production mode.

    Bind errors (port in use, permission denied) propagate out of
    ``Server.run()`` and end the process.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(
        host=host,
        port=port,
        workers=config.workers,
        log_level=config.log_level,
        log_format=config.log_format,
        backlog=config.backlog,
        keep_alive_timeout=config.keep_alive_timeout,
        request_timeout=config.request_timeout,
    )
    server = Server(server_config, app)
    server.run()
