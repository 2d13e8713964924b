"""Stuffsite application class.

Mutable during setup (route registration, error handlers, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from stuffsite._internal.asgi import Receive, Scope, Send
from stuffsite._internal.invoke import invoke
from stuffsite._internal.types import ErrorHandler, Handler, Hook
from stuffsite.config import AppConfig
from stuffsite.routing.route import Route
from stuffsite.routing.router import Router, parse_path
from stuffsite.server.handler import handle_request

logger = logging.getLogger("stuffsite.server")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """The stuffsite application.

    Mutable during setup (route registration, error handlers, hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the router, even when several workers receive
        their first request at once.
    """

    __slots__ = (
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_listen_port",
        "_pending_routes",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._router: Router | None = None
        # Set by run(); None when served by an external ASGI server
        self._listen_port: int | None = None

    # -- Registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a handler for a static path.

        ``methods`` defaults to ``["GET"]``; GET routes also answer HEAD.
        Invalid paths raise ``ConfigurationError`` at decoration time.
        """
        self._check_not_frozen()
        parse_path(path)

        def decorator(func: Handler) -> Handler:
            self._pending_routes.append(
                _PendingRoute(path=path, handler=func, methods=methods, name=name)
            )
            return func

        return decorator

    def error(self, code_or_exception: int | type) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler for a status code or exception type."""
        self._check_not_frozen()

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def on_startup(self, func: Hook) -> Hook:
        """Register a hook run once when the server starts (ASGI lifespan)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a hook run once when the server stops (ASGI lifespan)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    @property
    def router(self) -> Router:
        """The compiled router. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Compiles the route table and hands control to pounce until the
        process is stopped. The "listening" line is logged from the
        lifespan startup, which pounce runs once the socket is bound.
        """
        self._ensure_frozen()

        _host = self.config.host if host is None else host
        _port = self.config.port if port is None else port
        self._listen_port = _port

        if self.config.debug:
            from stuffsite.server.dev import run_dev_server

            run_dev_server(self, self.config, _host, _port, reload=True)
        else:
            from stuffsite.server.production import run_production_server

            run_production_server(self, self.config, _host, _port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            router=self.router,
            error_handlers=self._error_handlers,
            debug=self.config.debug,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
                if self._listen_port is not None:
                    logger.info(
                        "App server listening on %d. (Go to http://localhost:%d)",
                        self._listen_port,
                        self._listen_port,
                    )

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    # -- Internal --

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started serving requests."
            raise RuntimeError(msg)

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(
                Route(
                    path=pending.path,
                    handler=pending.handler,
                    methods=methods,
                    name=pending.name or pending.handler.__name__,
                )
            )
        router.compile()
        self._router = router
        self._frozen = True
        logger.debug("Compiled %d route(s)", len(router.routes))
