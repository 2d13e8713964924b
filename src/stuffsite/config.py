"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

DEFAULT_PORT = 8080


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have working defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Production settings
    workers: int = 1  # 0 = auto-detect from CPU count
    log_level: str = "info"
    log_format: str = "text"
    backlog: int = 2048
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0
